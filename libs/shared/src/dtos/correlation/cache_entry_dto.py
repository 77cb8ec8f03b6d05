"""Cache Entry DTO"""

from typing import TypedDict

from libs.shared.src.dtos.correlation.correlation_result_dto import (
    CorrelationResultDTO,
)


class CacheEntryDTO(TypedDict):
    """Stored correlation result plus storage metadata"""

    key: str
    written_at: str
    result: CorrelationResultDTO
