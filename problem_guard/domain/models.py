"""
Domain models for merged problem records.

A merged problem is a problem entry joined with solver statistics (first
accepted submission, fastest and shortest code, solver count and point).
The model mirrors one element of the upstream ``merged-problems.json`` list
and is only built from values that already passed the shape guard.
"""
from __future__ import annotations

from typing import Optional, Union

from pydantic import BaseModel, Field

Number = Union[int, float]


class MergedProblem(BaseModel):
    """
    Read-only view of a validated merged problem record.
    """

    # Basic information
    id: str = Field(..., description="Problem identifier, e.g. 'abc001_a'.")
    contest_id: str = Field(..., description="Contest the problem belongs to.")
    title: str = Field(..., description="Problem title as shown in the contest.")

    # Information for first AC
    first_user_id: Optional[str] = Field(..., description="User with the first accepted submission.")
    first_contest_id: Optional[str] = Field(..., description="Contest of the first accepted submission.")
    first_submission_id: Optional[Number] = Field(..., description="First accepted submission id.")

    # Information for fastest code
    fastest_user_id: Optional[str] = Field(..., description="User with the fastest accepted code.")
    fastest_contest_id: Optional[str] = Field(..., description="Contest of the fastest submission.")
    fastest_submission_id: Optional[Number] = Field(..., description="Fastest submission id.")
    execution_time: Optional[Number] = Field(..., description="Execution time of the fastest code (ms).")

    # Information for shortest code
    shortest_user_id: Optional[str] = Field(..., description="User with the shortest accepted code.")
    shortest_contest_id: Optional[str] = Field(..., description="Contest of the shortest submission.")
    shortest_submission_id: Optional[Number] = Field(..., description="Shortest submission id.")
    source_code_length: Optional[Number] = Field(..., description="Length of the shortest code (bytes).")

    solver_count: Optional[Number] = Field(..., description="Number of distinct solvers.")
    point: Optional[Number] = Field(None, description="Problem score; absent for unscored problems.")

    model_config = {
        "frozen": True,
        "strict": True,
        "extra": "ignore",
    }


__all__ = ["MergedProblem", "Number"]
