from typing import Any


class CustomerSession:
    """Key/value state for one visitor, loaded from and committed back to a cookie."""

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = dict(data or {})
        self.modified: bool = False

    def get(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    def has(self, key: str) -> bool:
        return key in self._data

    def set(self, key: str, value: Any) -> None:
        self._data[key] = value
        self.modified = True

    def unset(self, key: str) -> None:
        if key in self._data:
            del self._data[key]
            self.modified = True

    @property
    def data(self) -> dict[str, Any]:
        return dict(self._data)
