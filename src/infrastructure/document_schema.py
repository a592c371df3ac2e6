"""Pydantic schema for the portable financial document.

The document is a JSON object holding eight camelCase collections. Amounts
are written as JSON numbers when a float reproduces them exactly and as
strings otherwise, so export followed by import is lossless.
"""

import json
from dataclasses import asdict
from decimal import Decimal
from typing import Annotated, Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    PlainSerializer,
    StringConstraints,
    ValidationError,
)
from pydantic.alias_generators import to_camel

from src.application.ports.document_codec import (
    ALL_COLLECTIONS,
    DocumentCodecPort,
    ImportFormatError,
)
from src.domain.models import (
    Asset,
    AssetCategory,
    Debt,
    Expense,
    ExpenseCategory,
    ExpenseMode,
    ExpensePlan,
    FinancialData,
    Income,
    IncomeGoal,
    IncomeSource,
    Purchase,
    PurchaseStatus,
    RecurringExpense,
)
from src.domain.services.normalization import MONTH_KEY_PATTERN


def _serialize_amount(value: Decimal) -> float | int | str:
    if value == value.to_integral_value():
        return int(value)
    as_float = float(value)
    if Decimal(repr(as_float)) == value:
        return as_float
    return str(value)


Amount = Annotated[
    Decimal,
    PlainSerializer(_serialize_amount, when_used="json"),
]

MonthKey = Annotated[str, StringConstraints(pattern=MONTH_KEY_PATTERN)]


class _Schema(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class ExpenseSchema(_Schema):
    id: str
    date: str
    category: ExpenseCategory
    amount: Amount
    description: str = ""
    mode: ExpenseMode


class RecurringExpenseSchema(_Schema):
    id: str
    description: str = ""
    amount: Amount
    category: ExpenseCategory
    mode: ExpenseMode
    frequency: Literal["monthly"] = "monthly"
    start_date: MonthKey


class ExpensePlanSchema(_Schema):
    id: str
    month: MonthKey
    mode: ExpenseMode
    amount: Amount


class DebtSchema(_Schema):
    id: str
    name: str
    original_amount: Amount
    current_balance: Amount
    interest_rate: Amount
    minimum_payment: Amount


class IncomeSchema(_Schema):
    id: str
    date: str
    source: IncomeSource
    amount: Amount
    description: str = ""


class IncomeGoalSchema(_Schema):
    id: str
    month: MonthKey
    amount: Amount


class AssetSchema(_Schema):
    id: str
    name: str
    category: AssetCategory
    amount_invested: Amount
    current_value: Amount
    date: str
    basket: str | None = None


class PurchaseSchema(_Schema):
    id: str
    name: str
    cost: Amount
    category: ExpenseCategory
    justification: str = ""
    status: PurchaseStatus
    date_added: str


_RECORD_TYPES = {
    "expenses": (ExpenseSchema, Expense),
    "recurring_expenses": (RecurringExpenseSchema, RecurringExpense),
    "debts": (DebtSchema, Debt),
    "income": (IncomeSchema, Income),
    "assets": (AssetSchema, Asset),
    "income_goals": (IncomeGoalSchema, IncomeGoal),
    "expense_plans": (ExpensePlanSchema, ExpensePlan),
    "purchases": (PurchaseSchema, Purchase),
}


class FinancialDocument(_Schema):
    """Whole-document schema; every record must validate."""

    expenses: list[ExpenseSchema] = []
    recurring_expenses: list[RecurringExpenseSchema] = []
    debts: list[DebtSchema] = []
    income: list[IncomeSchema] = []
    assets: list[AssetSchema] = []
    income_goals: list[IncomeGoalSchema] = []
    expense_plans: list[ExpensePlanSchema] = []
    purchases: list[PurchaseSchema] = []

    @classmethod
    def from_domain(cls, data: FinancialData) -> "FinancialDocument":
        """Build the schema from a domain aggregate."""
        return cls.model_validate(
            {
                field: [asdict(record) for record in getattr(data, field)]
                for field in _RECORD_TYPES
            }
        )

    def to_domain(self) -> FinancialData:
        """Convert the validated document into a domain aggregate."""
        return FinancialData(
            **{
                field: tuple(
                    record_cls(**item.model_dump())
                    for item in getattr(self, field)
                )
                for field, (_, record_cls) in _RECORD_TYPES.items()
            }
        )


class JsonDocumentCodec(DocumentCodecPort):
    """Codec between FinancialData and pretty-printed JSON documents."""

    def encode(self, data: FinancialData) -> str:
        """Serialize the aggregate to JSON text."""
        document = FinancialDocument.from_domain(data)
        return json.dumps(
            document.model_dump(mode="json", by_alias=True),
            indent=2,
            ensure_ascii=False,
        )

    def decode(
        self,
        raw: str,
        required: tuple[str, ...] = ALL_COLLECTIONS,
    ) -> FinancialData:
        """Parse JSON text and validate it as a complete document.

        Args:
            raw: JSON text.
            required: camelCase collections that must be present.

        Returns:
            FinancialData: Validated aggregate.

        Raises:
            ImportFormatError: If the text is not JSON, is not an object,
                misses a required collection or holds an invalid record.
        """
        try:
            payload = json.loads(raw, parse_float=Decimal)
        except (TypeError, json.JSONDecodeError) as exc:
            raise ImportFormatError(f"Document is not valid JSON: {exc}") from exc
        if not isinstance(payload, dict):
            raise ImportFormatError("Document must be a JSON object")
        missing = [key for key in required if key not in payload]
        if missing:
            raise ImportFormatError(
                f"Document is missing collections: {', '.join(missing)}"
            )
        try:
            document = FinancialDocument.model_validate(payload)
        except ValidationError as exc:
            raise ImportFormatError(
                f"Document failed validation with {exc.error_count()} errors: "
                f"{exc.errors()[0]['loc']}"
            ) from exc
        return document.to_domain()


__all__ = ["FinancialDocument", "JsonDocumentCodec"]
