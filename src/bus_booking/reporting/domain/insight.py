from abc import ABC, abstractmethod

from bus_booking.reporting.domain.dashboard import DashboardStats

_PROMPT_TEMPLATE = """\
Act as a Senior Business Analyst for a Bus Transport Company.
Here is our current dashboard data:

- Total Revenue: ₹{revenue}
- Total Bookings: {bookings}
- Cancelled Tickets: {cancelled}
- Active Buses: {buses}
- Top Performing Route: {top_route}

Based on this data, provide a professional executive summary with exactly 3 sections:
1. **Financial Assessment:** Analyze the revenue health.
2. **Operational Flag:** Point out any concern regarding cancellations or bus utilization.
3. **Strategic Action:** Suggest one specific marketing or operational move to improve profit.

Keep the tone professional and concise. Do not use markdown headers (#), just bolding (**).
"""


def build_insight_prompt(stats: DashboardStats) -> str:
    """集計値を埋め込んだ分析依頼文を生成する"""
    return _PROMPT_TEMPLATE.format(
        revenue=stats.revenue,
        bookings=stats.bookings,
        cancelled=stats.cancelled,
        buses=stats.buses,
        top_route=stats.top_route or "N/A",
    )


class InsightGenerator(ABC):
    """テキスト生成サービスのインターフェース"""

    @abstractmethod
    def generate(self, prompt: str) -> str:
        """プロンプトに対する生成テキストを返す"""
        raise NotImplementedError
