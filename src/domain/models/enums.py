"""Closed enumerations used by the financial records.

Values match the strings stored in the persisted document.
"""

from enum import Enum


class ExpenseCategory(str, Enum):
    HOUSING = "Housing"
    FOOD = "Food"
    TRANSPORTATION = "Transportation"
    TRAINING_GYM = "Training/Gym"
    HEALTH = "Health"
    DEBT_PAYMENTS = "Debt Payments"
    BUSINESS_EXPENSES = "Business Expenses"
    PERSONAL = "Personal"
    EMERGENCY = "Emergency"
    OTHER = "Other"


class ExpenseMode(str, Enum):
    SURVIVAL = "Survival Mode"
    GROWTH = "Growth Mode"
    BOTH = "Both"


class IncomeSource(str, Enum):
    EMPLOYMENT = "Employment"
    CONSULTING = "Consulting"
    NEWSLETTER = "Newsletter"
    COURSE_SALES = "Course Sales"
    SPEAKING = "Speaking"
    OTHER = "Other"


class AssetCategory(str, Enum):
    STOCKS_ETFS = "Stocks/ETFs"
    CRYPTO = "Crypto"
    SAVINGS = "Savings"
    EMERGENCY_FUND = "Emergency Fund"
    BUSINESS_ASSETS = "Business Assets"


class PurchaseStatus(str, Enum):
    CONSIDERING = "Considering"
    PURCHASED = "Purchased"
    DECLINED = "Declined"


__all__ = [
    "ExpenseCategory",
    "ExpenseMode",
    "IncomeSource",
    "AssetCategory",
    "PurchaseStatus",
]
