"""Pure reducer driving every mutation of the financial aggregate.

``financial_reducer`` maps ``(state, action)`` to a new ``FinancialData``.
The input state is never mutated. When an action changes nothing (unknown
id, nothing new to log) the very same state object is returned so callers
can skip persistence.
"""

from dataclasses import replace
from datetime import date
from typing import Callable

from src.domain.models import (
    Expense,
    ExpenseMode,
    ExpensePlan,
    FinancialData,
    IncomeGoal,
    PurchaseStatus,
)
from src.domain.models import actions as act
from src.domain.services.ids import new_id, purchase_expense_id
from src.domain.services.recurring import log_recurring_expenses


def _append(items: tuple, item) -> tuple:
    return items + (item,)


def _replace_by_id(items: tuple, item) -> tuple:
    if not any(existing.id == item.id for existing in items):
        return items
    return tuple(item if existing.id == item.id else existing for existing in items)


def _remove_by_id(items: tuple, item_id: str) -> tuple:
    kept = tuple(existing for existing in items if existing.id != item_id)
    return items if len(kept) == len(items) else kept


def _with(state: FinancialData, field: str, items: tuple) -> FinancialData:
    if items is getattr(state, field):
        return state
    return replace(state, **{field: items})


def _update_field_by_id(
    state: FinancialData,
    field: str,
    item_id: str,
    **changes,
) -> FinancialData:
    items = getattr(state, field)
    if not any(existing.id == item_id for existing in items):
        return state
    return replace(
        state,
        **{
            field: tuple(
                replace(existing, **changes) if existing.id == item_id else existing
                for existing in items
            )
        },
    )


def _set_state(state: FinancialData, action: act.SetState) -> FinancialData:
    return action.payload


def _log_recurring(
    state: FinancialData,
    action: act.LogRecurringExpensesForMonth,
) -> FinancialData:
    return log_recurring_expenses(state, action.month)


def _rename_basket(state: FinancialData, action: act.RenameBasket) -> FinancialData:
    new_name = action.new_name.strip()
    if not new_name or not any(
        asset.basket == action.old_name for asset in state.assets
    ):
        return state
    return replace(
        state,
        assets=tuple(
            replace(asset, basket=new_name)
            if asset.basket == action.old_name
            else asset
            for asset in state.assets
        ),
    )


def _update_purchase_status(
    state: FinancialData,
    action: act.UpdatePurchaseStatus,
) -> FinancialData:
    """Set a purchase status, logging an expense when it becomes purchased."""
    purchase = next((p for p in state.purchases if p.id == action.id), None)
    if purchase is None or purchase.status == action.status:
        return state

    updated = _update_field_by_id(state, "purchases", action.id, status=action.status)
    if action.status != PurchaseStatus.PURCHASED:
        return updated

    expense_id = purchase_expense_id(purchase.id)
    if any(expense.id == expense_id for expense in updated.expenses):
        return updated
    expense = Expense(
        id=expense_id,
        date=action.on_date or date.today().isoformat(),
        category=purchase.category,
        amount=purchase.cost,
        description=purchase.name,
        mode=ExpenseMode.GROWTH,
    )
    return replace(updated, expenses=_append(updated.expenses, expense))


def _upsert_income_goal(
    state: FinancialData,
    action: act.UpsertIncomeGoal,
) -> FinancialData:
    if any(goal.month == action.month for goal in state.income_goals):
        return replace(
            state,
            income_goals=tuple(
                replace(goal, amount=action.amount)
                if goal.month == action.month
                else goal
                for goal in state.income_goals
            ),
        )
    goal = IncomeGoal(id=new_id("ig"), month=action.month, amount=action.amount)
    return replace(state, income_goals=_append(state.income_goals, goal))


def _upsert_expense_plan(
    state: FinancialData,
    action: act.UpsertExpensePlan,
) -> FinancialData:
    def matches(plan: ExpensePlan) -> bool:
        return plan.month == action.month and plan.mode == action.mode

    if any(matches(plan) for plan in state.expense_plans):
        return replace(
            state,
            expense_plans=tuple(
                replace(plan, amount=action.amount) if matches(plan) else plan
                for plan in state.expense_plans
            ),
        )
    plan = ExpensePlan(
        id=new_id("ep"),
        month=action.month,
        mode=action.mode,
        amount=action.amount,
    )
    return replace(state, expense_plans=_append(state.expense_plans, plan))


def _collection_handlers() -> dict[type, Callable]:
    """Build add/update/delete handlers for each entity collection."""
    specs = (
        ("expenses", "expense", act.AddExpense, act.UpdateExpense, act.DeleteExpense),
        (
            "recurring_expenses",
            "recurring_expense",
            act.AddRecurringExpense,
            act.UpdateRecurringExpense,
            act.DeleteRecurringExpense,
        ),
        ("debts", "debt", act.AddDebt, act.UpdateDebt, act.DeleteDebt),
        ("income", "income", act.AddIncome, act.UpdateIncome, act.DeleteIncome),
        ("assets", "asset", act.AddAsset, act.UpdateAsset, act.DeleteAsset),
        (
            "purchases",
            "purchase",
            act.AddPurchase,
            act.UpdatePurchase,
            act.DeletePurchase,
        ),
    )
    handlers: dict[type, Callable] = {}
    for field, attr, add_cls, update_cls, delete_cls in specs:
        handlers[add_cls] = (
            lambda state, action, f=field, a=attr: _with(
                state, f, _append(getattr(state, f), getattr(action, a))
            )
        )
        handlers[update_cls] = (
            lambda state, action, f=field, a=attr: _with(
                state, f, _replace_by_id(getattr(state, f), getattr(action, a))
            )
        )
        handlers[delete_cls] = (
            lambda state, action, f=field: _with(
                state, f, _remove_by_id(getattr(state, f), action.id)
            )
        )
    handlers[act.DeleteIncomeGoal] = lambda state, action: _with(
        state, "income_goals", _remove_by_id(state.income_goals, action.id)
    )
    handlers[act.DeleteExpensePlan] = lambda state, action: _with(
        state, "expense_plans", _remove_by_id(state.expense_plans, action.id)
    )
    return handlers


_HANDLERS: dict[type, Callable] = {
    **_collection_handlers(),
    act.SetState: _set_state,
    act.LogRecurringExpensesForMonth: _log_recurring,
    act.UpdateDebtBalance: lambda state, action: _update_field_by_id(
        state, "debts", action.id, current_balance=action.new_balance
    ),
    act.UpdateAssetValue: lambda state, action: _update_field_by_id(
        state, "assets", action.id, current_value=action.new_value
    ),
    act.RenameBasket: _rename_basket,
    act.UpdatePurchaseStatus: _update_purchase_status,
    act.UpsertIncomeGoal: _upsert_income_goal,
    act.UpsertExpensePlan: _upsert_expense_plan,
}


def financial_reducer(
    state: FinancialData,
    action: act.FinancialAction,
) -> FinancialData:
    """Apply ``action`` to ``state`` and return the resulting aggregate.

    Args:
        state: Current aggregate, left untouched.
        action: Action describing the mutation.

    Returns:
        FinancialData: The next aggregate. Unsupported actions return
        ``state`` unchanged.
    """
    handler = _HANDLERS.get(type(action))
    if handler is None:
        return state
    return handler(state, action)


__all__ = ["financial_reducer"]
