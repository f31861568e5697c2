from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Todo:
    id: str
    description: str
    completed: bool = False
    created_at: int = 0

    def with_completed(self, completed: bool) -> "Todo":
        return replace(self, completed=bool(completed))
