"""
Business Case Entities

The shared vocabulary of the simulator and the decision engine:
- BaselineInputs: current-state assumptions of one business
- InputField: the addressable numeric fields of BaselineInputs
- LeverChange / LeverDefinition: perturbations and the catalog entries
  that describe them
- ScenarioDefinition / PresetOption: bundles of changes and named baselines

BaselineInputs does not bound its rate fields. Whoever mutates
a record (see simulation.levers) is responsible for keeping rates in [0, 1].
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class BusinessModel(str, Enum):
    """Go-to-market model driving the conversion branch of the simulation."""
    PLG = "PLG"
    SALES_LED = "SALES_LED"


class AdjustmentKind(str, Enum):
    """How a lever changes its target field."""
    MULTIPLIER = "multiplier"
    ADDITIVE = "additive"


class LeverCategory(str, Enum):
    """Lever categories, each carrying a scaling prior in the decision engine."""
    MARKETING = "marketing"
    SALES = "sales"
    PRODUCT_OPS = "product_ops"
    UNIT_ECONOMICS = "unit_economics"


class BaselineInputs(BaseModel):
    """
    Current-state assumptions for one business.

    Rates are fractions (0.04 == 4%). Money is per month unless noted.
    The sales-led and PLG conversion fields coexist; the simulator only
    reads the pair that matches the selected business model.
    """
    model_config = ConfigDict(frozen=True)

    # Acquisition
    sessions_per_month: float = Field(default=0.0, description="Website sessions per month")
    mql_rate: float = Field(default=0.0, description="Session to MQL conversion rate")
    cost_per_mql: float = Field(default=0.0, description="Variable marketing cost per MQL")
    marketing_spend_fixed: float = Field(
        default=0.0,
        description="Fixed monthly marketing budget, used when use_cost_per_mql is off"
    )
    use_cost_per_mql: bool = Field(default=True, description="Variable vs. fixed marketing cost")

    # Sales-led conversion
    mql_to_sql_rate: float = Field(default=0.0, description="MQL to SQL qualification rate")
    sql_to_customer_rate: float = Field(default=0.0, description="SQL win rate")
    sales_cycle_days: float = Field(default=0.0, description="Average sales cycle length")
    sales_cost_per_sql: float = Field(default=0.0, description="Variable sales cost per SQL")

    # PLG conversion
    activation_rate: float = Field(default=0.0, description="MQL to activated user rate")
    trial_to_paid_rate: float = Field(default=0.0, description="Activated user to paying customer rate")

    # Monetization & retention
    arpa_month: float = Field(default=0.0, description="Average revenue per account per month")
    logo_churn_monthly: float = Field(default=0.0, description="Monthly logo churn")
    gross_margin: float = Field(default=0.0, description="Gross margin")
    expansion_rate_monthly: float = Field(
        default=0.0,
        description="Monthly expansion revenue rate on the retained cohort"
    )

    # Operations
    onboarding_hours_per_customer: float = Field(default=0.0, description="Onboarding hours per new customer")
    support_hours_per_customer_month: float = Field(
        default=0.0,
        description="Support hours per customer per month"
    )
    ops_cost_per_hour: float = Field(default=0.0, description="Fully loaded cost per ops hour")
    hours_per_fte_month: float = Field(default=140.0, description="Productive hours per FTE per month")


class InputField(str, Enum):
    """
    Addressable numeric fields of BaselineInputs.

    Every member must also appear in exactly one of RATE_FIELDS or
    UNBOUNDED_FIELDS below.
    """
    SESSIONS_PER_MONTH = "sessions_per_month"
    MQL_RATE = "mql_rate"
    COST_PER_MQL = "cost_per_mql"
    MARKETING_SPEND_FIXED = "marketing_spend_fixed"
    MQL_TO_SQL_RATE = "mql_to_sql_rate"
    SQL_TO_CUSTOMER_RATE = "sql_to_customer_rate"
    SALES_CYCLE_DAYS = "sales_cycle_days"
    SALES_COST_PER_SQL = "sales_cost_per_sql"
    ACTIVATION_RATE = "activation_rate"
    TRIAL_TO_PAID_RATE = "trial_to_paid_rate"
    ARPA_MONTH = "arpa_month"
    LOGO_CHURN_MONTHLY = "logo_churn_monthly"
    GROSS_MARGIN = "gross_margin"
    EXPANSION_RATE_MONTHLY = "expansion_rate_monthly"
    ONBOARDING_HOURS_PER_CUSTOMER = "onboarding_hours_per_customer"
    SUPPORT_HOURS_PER_CUSTOMER_MONTH = "support_hours_per_customer_month"
    OPS_COST_PER_HOUR = "ops_cost_per_hour"
    HOURS_PER_FTE_MONTH = "hours_per_fte_month"

    @classmethod
    def from_key(cls, key: str) -> Optional["InputField"]:
        """Resolve a field name, returning None for names that are not addressable."""
        return next((f for f in cls if f.value == key), None)

    def read(self, inputs: BaselineInputs) -> float:
        return getattr(inputs, self.value)

    def write(self, inputs: BaselineInputs, value: float) -> BaselineInputs:
        """Return a copy of inputs with this field set to value."""
        return inputs.model_copy(update={self.value: value})

    @property
    def is_rate(self) -> bool:
        return self in RATE_FIELDS


# Clamped to [0, 1] after lever application
RATE_FIELDS = frozenset({
    InputField.MQL_RATE,
    InputField.MQL_TO_SQL_RATE,
    InputField.SQL_TO_CUSTOMER_RATE,
    InputField.ACTIVATION_RATE,
    InputField.TRIAL_TO_PAID_RATE,
    InputField.LOGO_CHURN_MONTHLY,
    InputField.GROSS_MARGIN,
    InputField.EXPANSION_RATE_MONTHLY,
})

# Left as-is after lever application, even if negative
UNBOUNDED_FIELDS = frozenset({
    InputField.SESSIONS_PER_MONTH,
    InputField.COST_PER_MQL,
    InputField.MARKETING_SPEND_FIXED,
    InputField.SALES_CYCLE_DAYS,
    InputField.SALES_COST_PER_SQL,
    InputField.ARPA_MONTH,
    InputField.ONBOARDING_HOURS_PER_CUSTOMER,
    InputField.SUPPORT_HOURS_PER_CUSTOMER_MONTH,
    InputField.OPS_COST_PER_HOUR,
    InputField.HOURS_PER_FTE_MONTH,
})

# PLG-only conversion stages, meaningless for a sales-led funnel
SELF_SERVE_CONVERSION_FIELDS = frozenset({
    InputField.ACTIVATION_RATE,
    InputField.TRIAL_TO_PAID_RATE,
})


@dataclass(frozen=True)
class LeverChange:
    """One perturbation of one BaselineInputs field."""
    field: Union[InputField, str]
    kind: AdjustmentKind
    magnitude: float


@dataclass(frozen=True)
class LeverDefinition:
    """
    Catalog entry describing a lever and its default step size.

    The decision engine applies default_change() on its own to the
    baseline to measure the lever's impact.
    """
    field: InputField
    label: str
    category: LeverCategory
    default_kind: AdjustmentKind
    default_magnitude: float
    sales_led_only: bool = False

    def default_change(self) -> LeverChange:
        return LeverChange(self.field, self.default_kind, self.default_magnitude)

    def applies_to(self, model: BusinessModel) -> bool:
        """Whether the lever is meaningful for the given business model."""
        if model == BusinessModel.PLG and self.sales_led_only:
            return False
        if model == BusinessModel.SALES_LED and self.field in SELF_SERVE_CONVERSION_FIELDS:
            return False
        return True


@dataclass(frozen=True)
class ScenarioDefinition:
    """A named strategy: an ordered bundle of lever changes."""
    id: str
    name: str
    changes: tuple = ()


@dataclass(frozen=True)
class PresetOption:
    """A named baseline used to seed inputs."""
    id: str
    label: str
    description: str
    business_model: BusinessModel
    baseline: BaselineInputs
