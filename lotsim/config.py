"""
시뮬레이션 환경 설정과 관련된 모든 상수 및 구성 값을 관리하는 모듈입니다.
"""
import string

# 시뮬레이션 기본 설정
SEED = 422                  # 난수 생성기 시드
NUM_SECONDS_IN_1H = 3600    # 1시간 (초 단위)
SIMULATION_DURATION = 24 * NUM_SECONDS_IN_1H   # 24시간 (초 단위)

# 차량 설정
PLATE_NUM_LENGTH = 3        # 번호판 길이
PLATE_ALPHABET = string.ascii_uppercase + string.digits

# 주차 시간 설정 (초 단위)
MAX_PARKING_DURATION = 8 * NUM_SECONDS_IN_1H   # 최대 주차 가능 시간

# 주차장 설정
DEFAULT_LOT_CAPACITY = 100  # 기본 주차면 수
DEFAULT_ARRIVAL_RATE = 50   # 시간당 도착 차량 수

# 로깅 설정
OCCUPANCY_SAMPLE_INTERVAL = 60  # 점유율 기록 간격 (초)

# 최적 주차면 탐색 설정
NUM_RUNS = 10               # 주차면 수별 시뮬레이션 반복 횟수
QUEUE_THRESHOLD = 5         # 허용 가능한 평균 대기열 길이
MAX_LOT_CAPACITY = 10_000   # 탐색할 최대 주차면 수

# 셀 타입 정의
CELL_ENTRANCE = "E"  # 입구
CELL_ROAD = "R"      # 도로
CELL_PARK = "P"      # 주차면
CELL_EXIT = "X"      # 출구
CELL_UNUSED = "N"    # 사용하지 않는 공간
