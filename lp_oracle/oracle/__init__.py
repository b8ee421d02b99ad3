"""
Oracle layer for LP Oracle

- normalization: 소스별 배율 캐시와 WAD 정규화
- fair_value: 합성 가격 기반 준비금 / LP 지분 가격
- feed: LP 지분 가격을 시세 피드로 노출
"""

from .normalization import ScaleRegistry, default_scales
from .fair_value import FairValueOracle
from .feed import LpShareFeed
