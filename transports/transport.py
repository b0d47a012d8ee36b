from collections.abc import Mapping
from typing import Any

QueryParams = Mapping[str, Any]


class Transport:
    def get(self, path: str, params: QueryParams | None = None) -> Any:
        raise NotImplementedError  # pragma: no cover
