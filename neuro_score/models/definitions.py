"""Test definition models."""

from enum import Enum
from typing import ClassVar, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from neuro_score.numeric import ratio


class ScoringModel(str, Enum):
    """Scoring model that selects the calculator and classification branch."""

    PERCENTILE = "percentile"
    ZSCORE = "zscore"
    NORMATIVE_TABLE = "normative_table"


class Direction(str, Enum):
    """Direction in which a raw measure improves."""

    HIGHER_IS_BETTER = "higher_is_better"  # sequences, correct answers
    LOWER_IS_BETTER = "lower_is_better"  # time, errors


class EducationLevel(str, Enum):
    """Years of formal education used to stratify adult norms."""

    FUNDAMENTAL = "5-8"
    MEDIO = "9-11"
    SUPERIOR = "12+"

    @property
    def label(self) -> str:
        return {
            EducationLevel.FUNDAMENTAL: "Ensino Fundamental (5-8 anos)",
            EducationLevel.MEDIO: "Ensino Médio (9-11 anos)",
            EducationLevel.SUPERIOR: "Ensino Superior (12+ anos)",
        }[self]


class AgeRange(BaseModel):
    """Inclusive age range in whole years."""

    model_config = ConfigDict(frozen=True)

    min_age: int = Field(..., ge=0)
    max_age: int = Field(..., ge=0)

    @model_validator(mode="after")
    def _check_order(self) -> "AgeRange":
        if self.min_age > self.max_age:
            raise ValueError(f"min_age {self.min_age} is greater than max_age {self.max_age}")
        return self

    def contains(self, age: int) -> bool:
        return self.min_age <= age <= self.max_age

    @property
    def label(self) -> str:
        return f"{self.min_age} a {self.max_age} anos"


class DerivedOperation(str, Enum):
    """How a derived raw score combines its operands."""

    LINEAR = "linear"  # weighted sum plus a constant
    RATIO = "ratio"  # first operand over the second


class DerivedScore(BaseModel):
    """Raw score computed from other raw scores.

    Linear scores cover differences (B - A), totals and shifted scores such
    as ``REC - 35``. A ratio is undefined when its denominator is zero.
    """

    model_config = ConfigDict(frozen=True)

    operation: DerivedOperation = DerivedOperation.LINEAR
    operands: tuple[str, ...]
    weights: Optional[tuple[float, ...]] = None
    constant: float = 0

    @model_validator(mode="after")
    def _check_shape(self) -> "DerivedScore":
        if not self.operands:
            raise ValueError("A derived score needs at least one operand")
        if self.weights is not None and len(self.weights) != len(self.operands):
            raise ValueError("weights and operands differ in length")
        if self.operation == DerivedOperation.RATIO and len(self.operands) != 2:
            raise ValueError("A ratio takes exactly two operands")
        return self

    @classmethod
    def difference(cls, minuend: str, subtrahend: str) -> "DerivedScore":
        return cls(operands=(minuend, subtrahend), weights=(1, -1))

    @classmethod
    def total(cls, *names: str) -> "DerivedScore":
        return cls(operands=names)

    @classmethod
    def shifted(cls, name: str, constant: float) -> "DerivedScore":
        return cls(operands=(name,), constant=constant)

    @classmethod
    def linear(cls, weighted: dict[str, float], constant: float = 0) -> "DerivedScore":
        return cls(operands=tuple(weighted), weights=tuple(weighted.values()), constant=constant)

    @classmethod
    def ratio(cls, numerator: str, denominator: str) -> "DerivedScore":
        return cls(operation=DerivedOperation.RATIO, operands=(numerator, denominator))

    def compute(self, values: dict[str, float]) -> Optional[float]:
        if self.operation == DerivedOperation.RATIO:
            numerator, denominator = (values[name] for name in self.operands)
            return ratio(numerator, denominator)
        weights = self.weights or (1,) * len(self.operands)
        return sum(w * values[name] for w, name in zip(weights, self.operands)) + self.constant


class SubscoreDefinition(BaseModel):
    """One named measurement produced by a test."""

    model_config = ConfigDict(frozen=True)

    name: str
    label: str
    source: Optional[str] = Field(
        None, description="Input field holding the raw value (defaults to name)"
    )
    derived: Optional[DerivedScore] = None
    valid_range: Optional[tuple[float, float]] = Field(
        None, description="Inclusive range of acceptable raw values"
    )
    direction: Direction = Direction.HIGHER_IS_BETTER
    mean_field: Optional[str] = Field(None, description="Caller-supplied normative mean")
    sd_field: Optional[str] = Field(None, description="Caller-supplied normative SD")
    categorical: bool = Field(False, description="Accepts percentile range codes")
    entered: bool = Field(False, description="Score read from the manual and entered as the raw value")
    normed: bool = Field(True, description="False for descriptive measures with no norms")

    @model_validator(mode="after")
    def _check_source(self) -> "SubscoreDefinition":
        if self.derived is not None and self.source is not None:
            raise ValueError(f"Subscore {self.name} cannot be both derived and sourced")
        if (self.mean_field is None) != (self.sd_field is None):
            raise ValueError(f"Subscore {self.name} needs both mean_field and sd_field")
        if self.entered and (self.derived is not None or self.mean_field is not None):
            raise ValueError(f"Subscore {self.name} is entered and cannot be derived or inline-normed")
        return self

    @property
    def input_field(self) -> str:
        return self.source or self.name

    @property
    def raw_key(self) -> str:
        """Key of this subscore's raw value in a result's ``raw_scores``."""
        return self.name if self.derived is not None else self.input_field

    @property
    def is_derived(self) -> bool:
        return self.derived is not None

    @property
    def uses_inline_norms(self) -> bool:
        return self.mean_field is not None

    def dependencies(self) -> tuple[str, ...]:
        """Input fields (or earlier derived scores) whose values this subscore reads."""
        if self.derived is not None:
            return self.derived.operands
        fields = [self.input_field]
        if self.mean_field and self.sd_field:
            fields.extend([self.mean_field, self.sd_field])
        return tuple(fields)

    def accepts(self, raw: float) -> bool:
        if self.valid_range is None:
            return True
        low, high = self.valid_range
        return low <= raw <= high


class TestDefinition(BaseModel):
    """Static description of a neuropsychological instrument."""

    __test__: ClassVar[bool] = False

    model_config = ConfigDict(frozen=True)

    code: str
    name: str
    full_name: str
    description: str = ""
    valid_age_range: AgeRange
    scoring_model: ScoringModel
    input_fields: tuple[str, ...]
    subscores: tuple[SubscoreDefinition, ...]
    requires_education: bool = False
    group_field: Optional[str] = Field(
        None, description="Input field naming the norm group, e.g. the school type"
    )
    groups: tuple[str, ...] = ()
    main_subscore: Optional[str] = None
    provisional_norms: bool = Field(
        False, description="Norms are placeholders pending the published tables"
    )

    @model_validator(mode="after")
    def _check_fields(self) -> "TestDefinition":
        known = set(self.input_fields)
        names = [s.name for s in self.subscores]
        if len(names) != len(set(names)):
            raise ValueError(f"{self.code}: duplicate subscore names")
        for subscore in self.subscores:
            missing = [f for f in subscore.dependencies() if f not in known]
            if missing:
                raise ValueError(
                    f"{self.code}: subscore {subscore.name} reads undeclared inputs {missing}"
                )
            # Later derived scores may build on earlier ones.
            if subscore.is_derived:
                known.add(subscore.name)
        if (self.group_field is None) != (not self.groups):
            raise ValueError(f"{self.code}: group_field and groups go together")
        if self.group_field is not None and self.group_field not in self.input_fields:
            raise ValueError(f"{self.code}: group field {self.group_field} is not an input")
        if self.main_subscore is not None and self.main_subscore not in names:
            raise ValueError(f"{self.code}: unknown main subscore {self.main_subscore}")
        return self

    @property
    def min_age(self) -> int:
        return self.valid_age_range.min_age

    @property
    def max_age(self) -> int:
        return self.valid_age_range.max_age

    @property
    def subscore_names(self) -> list[str]:
        return [s.name for s in self.subscores]

    def get_subscore(self, name: str) -> Optional[SubscoreDefinition]:
        for subscore in self.subscores:
            if subscore.name == name:
                return subscore
        return None

    def label_for(self, name: str) -> str:
        subscore = self.get_subscore(name)
        return subscore.label if subscore else name
