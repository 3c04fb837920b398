"""Scenario filter deciding whether a validator is active for a scenario.

A scenario is a named mode of use of a data object, such as ``"insert"``
or ``"update"``. Each validator carries an inclusion set (``on``) and an
exclusion set (``except``); the exclusion set always wins.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from scenario_validation.utils.text_utils import split_names


class ScenarioFilter(BaseModel):
    """Inclusion and exclusion sets of scenario names.
    
    Both sets accept a comma/whitespace separated string or any iterable
    of names and are normalized to frozensets of distinct names.
    
    Attributes:
        on: Scenarios the validator is restricted to (empty = all)
        except_: Scenarios the validator never applies to. Populated from
            either ``except`` or ``except_``.
    
    Example:
        ```python
        scenarios = ScenarioFilter.from_values(on="insert", except_=["import"])
        scenarios.apply_to("insert")  # True
        scenarios.apply_to("update")  # False
        ```
    """
    
    model_config = ConfigDict(frozen=True, populate_by_name=True)
    
    on: frozenset[str] = Field(
        default_factory=frozenset,
        description="Scenarios the validator applies to; empty means all",
    )
    
    except_: frozenset[str] = Field(
        default_factory=frozenset,
        alias="except",
        description="Scenarios the validator never applies to",
    )
    
    @field_validator("on", "except_", mode="before")
    @classmethod
    def normalize_names(cls, value: Any) -> frozenset[str]:
        """Split delimited strings and collapse sequences into a frozenset."""
        return frozenset(split_names(value))
    
    @classmethod
    def from_values(cls, on: Any = None, except_: Any = None) -> "ScenarioFilter":
        """Build a filter from raw ``on``/``except`` parameter values."""
        return cls(on=on, except_=except_)
    
    def apply_to(self, scenario: str) -> bool:
        """Return whether a validator with this filter runs in scenario.
        
        Exclusion has strict priority: a scenario listed in both sets is
        excluded.
        """
        if scenario in self.except_:
            return False
        return not self.on or scenario in self.on
