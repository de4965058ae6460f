from bus_booking.reporting.applications.dashboard import DashboardService
from bus_booking.reporting.domain import InsightGenerator, build_insight_prompt
from bus_booking.shared.utils import get_logger

logger = get_logger("insight-service")


class GenerateInsightService:
    """集計値から経営分析コメントを生成するユースケース

    生成に失敗しても例外は送出せず、"Error: ..." で始まる文字列を返す。
    """

    def __init__(
        self, dashboard_service: DashboardService, generator: InsightGenerator
    ) -> None:
        self._dashboard_service = dashboard_service
        self._generator = generator

    def generate(self) -> str:
        prompt = build_insight_prompt(self._dashboard_service.stats())
        try:
            return self._generator.generate(prompt)
        except Exception as e:
            logger.exception("Insight generation failed")
            return f"Error: {e}"
