"""
LP Share Feed - LP 지분 가격을 시세 피드 형태로 노출

FairValueOracle과 페어 하나를 묶어 QuoteFeedSource 계약(address, decimals, latest_price)을
구현한다. 담보 프로토콜은 외부 시세 피드와 같은 방식으로 LP 지분 가격을 읽을 수 있다.
"""

from typing import Tuple

from .fair_value import FairValueOracle


class LpShareFeed:
    """LP 지분 가격 피드

    사용법:
        feed = LpShareFeed(oracle, vault.address)
        price, updated_at = feed.latest_price()
    """

    def __init__(self, oracle: FairValueOracle, pair: str):
        # 등록되지 않은 페어는 생성 시점에 거부
        oracle.record_for(pair)
        self.oracle = oracle
        self.pair = pair
        # 배율 캐시에서 볼트 지분 토큰과 구분되는 식별자
        self.address = f"{pair.lower()}:lp-share"

    def decimals(self) -> int:
        """가격 소수점 자릿수 (표시 토큰 기준)"""
        return self.oracle.denomination_decimals

    def latest_price(self) -> Tuple[int, int]:
        """(가격, 타임스탬프). 호출할 때마다 새로 계산"""
        quote = self.oracle.quote(self.pair)
        return quote.price, quote.updated_at

    def __repr__(self) -> str:
        return f"LpShareFeed(pair={self.pair.lower()}, decimals={self.decimals()})"
