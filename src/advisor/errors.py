from __future__ import annotations


class AdvisoryBackendError(RuntimeError):
    """The text-generation backend call failed for an advisory category."""

    def __init__(self, category_id: str, context: str, cause: BaseException) -> None:
        super().__init__(f"{context}: {cause}")
        self.category_id = category_id
        self.context = context
