import asyncio
import concurrent.futures
from typing import List, Optional, Sequence, Tuple, Union
from vintagepy.domain.errors import FilterError
from vintagepy.domain.models import FilterStyle, Tier
from vintagepy.kernel.system.config import APP_CONFIG
from vintagepy.kernel.system.logging import get_logger
from vintagepy.services.rendering.engine import VintageEngine

logger = get_logger(__name__)

BatchItem = Tuple[FilterStyle, bytes, Tier]
BatchResult = Union[bytes, FilterError]


class VintageFilterService:
    """
    Async facade that keeps pipeline runs off the caller's event loop.
    There is no cancellation: a started run always completes or fails.
    """

    def __init__(
        self,
        engine: Optional[VintageEngine] = None,
        max_workers: int = APP_CONFIG.max_workers,
    ) -> None:
        self.engine = engine or VintageEngine()
        self._executor = concurrent.futures.ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="vintagepy"
        )

    async def _run(self, style: FilterStyle, data: bytes, tier: Tier) -> bytes:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(
            self._executor, self.engine.run, style, data, tier
        )

    async def apply_filter(self, style: FilterStyle, data: bytes) -> bytes:
        return await self._run(style, data, Tier.FULL)

    async def apply_lightweight_filter(self, style: FilterStyle, data: bytes) -> bytes:
        return await self._run(style, data, Tier.LIGHTWEIGHT)

    async def resave(self, data: bytes) -> bytes:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(self._executor, self.engine.resave, data)

    async def apply_batch(self, items: Sequence[BatchItem]) -> List[BatchResult]:
        """
        Runs independent invocations in parallel. Filter errors are returned
        in place of the failed item's bytes; anything else propagates.
        """
        tasks = [self._run(style, data, tier) for style, data, tier in items]
        results = await asyncio.gather(*tasks, return_exceptions=True)

        out: List[BatchResult] = []
        for (style, _data, tier), res in zip(items, results):
            if isinstance(res, FilterError):
                logger.error(f"{style.display_name} ({tier.value}) failed: {res}")
                out.append(res)
            elif isinstance(res, BaseException):
                raise res
            else:
                out.append(res)
        return out

    def close(self) -> None:
        self._executor.shutdown(wait=True)

    def __enter__(self) -> "VintageFilterService":
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()
