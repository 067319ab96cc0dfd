"""
시뮬레이션 이벤트를 기록하고 분석하는 로깅 시스템입니다.
"""
from typing import List, Dict, Any, Optional
import pandas as pd
import matplotlib.pyplot as plt
import matplotlib as mpl
import platform
import json
import os
import time
import csv

from lotsim.config import NUM_SECONDS_IN_1H

# 한글 폰트 설정
if platform.system() == 'Windows':
    plt.rcParams['font.family'] = 'Malgun Gothic'  # 윈도우 한글 폰트
elif platform.system() == 'Darwin':  # macOS
    plt.rcParams['font.family'] = 'AppleGothic'    # 맥OS 한글 폰트
else:  # Linux
    plt.rcParams['font.family'] = 'NanumGothic'    # 리눅스 한글 폰트

mpl.rcParams['axes.unicode_minus'] = False   # 마이너스 기호 깨짐 방지

# 로그 엔트리 타입 정의
LogEntry = Dict[str, Any]
OccupancyEntry = Dict[str, int]

LOG_COLUMNS = ['time', 'plate', 'event', 'duration']


class SimulationLogger:
    """시뮬레이션 이벤트를 기록하고 분석하는 클래스"""

    def __init__(self, log_file: Optional[str] = None, stats_file: Optional[str] = None):
        """
        로거를 초기화합니다.

        Args:
            log_file: 로그 파일 경로 (None이면 메모리에만 기록)
            stats_file: 통계 파일 경로
        """
        self.log_file = log_file
        self.stats_file = stats_file

        # 로그 리스트 초기화
        self.log: List[LogEntry] = []
        self.occupancy_log: List[OccupancyEntry] = []

        # 로그 파일 초기화
        if self.log_file is not None:
            with open(self.log_file, 'w', newline='', encoding='utf-8') as f:
                writer = csv.writer(f)
                writer.writerow(LOG_COLUMNS)

        # 통계 초기화
        self.stats = {
            "arrivals": 0,
            "parks": 0,
            "departures": 0,
            "forced_departures": 0,
            "exits": 0,
            "blocked_ticks": 0,
            "avg_wait_time": 0.0,
            "avg_parking_time": 0.0
        }

    def add_event(self, time: int, plate: str, event: str, duration: Optional[int] = None) -> None:
        """
        시뮬레이션 이벤트를 로그에 추가합니다.

        Args:
            time: 이벤트 발생 시간 (시뮬레이션 시간, 초 단위)
            plate: 차량 번호판
            event: 이벤트 유형 (arrive, park, depart, exit)
            duration: park는 대기 시간, depart는 주차 시간
        """
        entry: LogEntry = {
            "time": time,
            "plate": plate,
            "event": event,
            "duration": duration
        }
        self.log.append(entry)

        # CSV 파일에 기록
        if self.log_file is not None:
            with open(self.log_file, 'a', newline='', encoding='utf-8') as f:
                writer = csv.writer(f)
                writer.writerow([time, plate, event, '' if duration is None else duration])

    def record_occupancy(self, time: int, occupancy: int, incoming: int, outgoing: int) -> None:
        """주차장 점유 상태를 기록합니다."""
        self.occupancy_log.append({
            "time": time,
            "occupancy": occupancy,
            "incoming": incoming,
            "outgoing": outgoing
        })

    def update_stats(self, event: str, duration: int = 0) -> None:
        """
        통계 정보를 업데이트합니다.

        Args:
            event: 이벤트 유형
            duration: 대기 시간(park) 또는 주차 시간(depart)
        """
        if event == "arrive":
            self.stats["arrivals"] += 1
        elif event == "park":
            self.stats["parks"] += 1
            self.stats["avg_wait_time"] = (
                (self.stats["avg_wait_time"] * (self.stats["parks"] - 1) + duration)
                / self.stats["parks"]
            )
        elif event in ("depart", "forced_depart"):
            self.stats["departures"] += 1
            if event == "forced_depart":
                self.stats["forced_departures"] += 1
            self.stats["avg_parking_time"] = (
                (self.stats["avg_parking_time"] * (self.stats["departures"] - 1) + duration)
                / self.stats["departures"]
            )
        elif event == "exit":
            self.stats["exits"] += 1
        elif event == "blocked":
            self.stats["blocked_ticks"] += 1
        else:
            raise ValueError(f"unknown stats event: {event}")

    def get_dataframe(self) -> pd.DataFrame:
        """로그를 판다스 DataFrame으로 변환해 반환합니다."""
        return pd.DataFrame(self.log, columns=LOG_COLUMNS)

    def get_occupancy_dataframe(self) -> pd.DataFrame:
        """점유율 기록을 DataFrame으로 반환"""
        return pd.DataFrame(self.occupancy_log, columns=["time", "occupancy", "incoming", "outgoing"])

    def save_to_csv(self, filename: Optional[str] = None) -> str:
        """로그 데이터를 CSV 파일로 저장"""
        if filename is None:
            filename = f"simulation_log_{int(time.time())}.csv"
        df = self.get_dataframe()
        df.to_csv(filename, index=False)
        return filename

    def save_stats(self) -> None:
        """통계 정보를 JSON 파일로 저장"""
        if self.stats_file is None:
            raise ValueError("stats_file is not set")
        with open(self.stats_file, 'w', encoding='utf-8') as f:
            json.dump(self.stats, f, ensure_ascii=False, indent=2)
        print(f"[INFO] 통계가 {self.stats_file}에 저장되었습니다.")

    def print_summary(self) -> None:
        """시뮬레이션 결과 요약을 출력합니다."""
        df = self.get_dataframe()

        print("=== 시뮬레이션 요약 ===")
        print(f"총 이벤트 수: {len(df)}")
        if not df.empty:
            print("\n이벤트 유형별 분포:")
            print(df.groupby("event").size())

        print(f"\n도착 차량: {self.stats['arrivals']}대")
        print(f"주차 차량: {self.stats['parks']}대")
        print(f"출차 결정: {self.stats['departures']}대 (최대 시간 초과 {self.stats['forced_departures']}대)")
        print(f"출구 통과: {self.stats['exits']}대")
        print(f"입차 대기 발생 시간: {self.stats['blocked_ticks']}초")
        print(f"평균 입차 대기 시간: {self.stats['avg_wait_time'] / 60:.1f}분")
        print(f"평균 주차 시간: {self.stats['avg_parking_time'] / 60:.1f}분")

        occ_df = self.get_occupancy_dataframe()
        if not occ_df.empty:
            print(f"\n최대 점유: {occ_df.occupancy.max()}대")
            print(f"평균 점유: {occ_df.occupancy.mean():.1f}대")
            print(f"최대 입차 대기열: {occ_df.incoming.max()}대")

    def generate_plots(self, results_dir: str) -> None:
        """시뮬레이션 결과를 그래프로 시각화"""
        # 1. 시간대별 주차장 점유율
        self._plot_parking_occupancy(results_dir)

        # 2. 시간대별 입차/출차
        self._plot_hourly_events(results_dir)

    def _plot_parking_occupancy(self, results_dir: str) -> None:
        """시간에 따른 주차 차량 수와 대기열 길이 그래프"""
        occ_df = self.get_occupancy_dataframe()
        hours = occ_df["time"] / NUM_SECONDS_IN_1H

        plt.figure(figsize=(12, 6))
        plt.plot(hours, occ_df["occupancy"], label="주차 중")
        plt.plot(hours, occ_df["incoming"], label="입차 대기")
        plt.plot(hours, occ_df["outgoing"], label="출차 대기")
        plt.title("시간대별 주차장 점유율")
        plt.xlabel("시간")
        plt.ylabel("차량 수")
        plt.legend()
        plt.grid(True)

        # 그래프 저장
        plt.savefig(os.path.join(results_dir, "parking_occupancy.png"))
        plt.close()

    def _plot_hourly_events(self, results_dir: str) -> None:
        """시간대별 도착/주차/출차 수 그래프"""
        df = self.get_dataframe()
        events = df[df.event.isin(["arrive", "park", "exit"])].copy()

        # 시간을 1시간 단위로 그룹화
        events["hour"] = events["time"] // NUM_SECONDS_IN_1H
        if events.empty:
            hourly_stats = pd.DataFrame()
        else:
            hourly_stats = events.groupby(["hour", "event"]).size().unstack(fill_value=0)

        plt.figure(figsize=(12, 6))
        labels = {"arrive": "도착", "park": "주차", "exit": "출차"}
        for event, label in labels.items():
            if event in hourly_stats.columns:
                plt.plot(hourly_stats.index, hourly_stats[event], marker="o", label=label)
        plt.title("시간대별 도착/주차/출차")
        plt.xlabel("시간")
        plt.ylabel("횟수")
        plt.legend()
        plt.grid(True)

        # 그래프 저장
        plt.savefig(os.path.join(results_dir, "hourly_events.png"))
        plt.close()
