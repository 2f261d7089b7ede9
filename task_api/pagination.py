from dataclasses import dataclass


@dataclass(frozen=True)
class Paginate:
    """Turns a 1-based page number and a page size into skip/limit.

    Inputs are not clamped; routers reject page < 1 and limit < 1.
    """

    page: int
    limit: int

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit

    def find_options(self) -> dict:
        return {"skip": self.skip, "limit": self.limit}
