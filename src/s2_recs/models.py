from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal, Union

from pydantic import BaseModel, Field

from s2_recs.errors import RecommendationError

DEFAULT_LIMIT = 5
DEFAULT_FIELDS = "title,url"

Scope = Literal["all-cs", "recent"]


class SingleSeedQuery(BaseModel):
    """Recommendations for one seed paper (GET /papers/forpaper/{paper_id})."""

    paper_id: str
    limit: int = DEFAULT_LIMIT
    fields: str = DEFAULT_FIELDS
    scope: Scope = "all-cs"

    def params(self) -> dict[str, Any]:
        return {"from": self.scope, "limit": self.limit, "fields": self.fields}


class MultiSeedQuery(BaseModel):
    """Recommendations from positive and negative example papers (POST /papers).

    Lists are forwarded in caller order. An empty ``positive_ids`` is sent as-is;
    the service decides what that means.
    """

    positive_ids: list[str]
    negative_ids: list[str] = Field(default_factory=list)
    limit: int = DEFAULT_LIMIT
    fields: str = DEFAULT_FIELDS

    def params(self) -> dict[str, Any]:
        return {"limit": self.limit, "fields": self.fields}

    def body(self) -> dict[str, list[str]]:
        return {
            "positivePaperIds": list(self.positive_ids),
            "negativePaperIds": list(self.negative_ids),
        }


RecommendationQuery = Union[SingleSeedQuery, MultiSeedQuery]


@dataclass(frozen=True)
class RecommendationSuccess:
    data: Any
    ok: Literal[True] = True

    @property
    def papers(self) -> list[dict[str, Any]]:
        if isinstance(self.data, dict):
            return self.data.get("recommendedPapers") or []
        return []


@dataclass(frozen=True)
class RecommendationFailure:
    error: RecommendationError
    ok: Literal[False] = False


FetchResult = Union[RecommendationSuccess, RecommendationFailure]
