"""Domain validation helpers."""

from logging import Logger

from src.domain.models import Debt


def validate_debt_balance(debt: Debt, logger: Logger) -> None:
    """Warn when a debt balance leaves the ``[0, original_amount]`` range.

    Args:
        debt: Debt record to inspect.
        logger: Logger used for warnings.
    """
    if debt.current_balance < 0:
        logger.warning(
            f"Debt balance is negative for debt={debt.id}: {debt.current_balance}"
        )
    if debt.current_balance > debt.original_amount:
        logger.warning(
            f"Debt balance exceeds original amount for debt={debt.id}: "
            f"{debt.current_balance} > {debt.original_amount}"
        )


__all__ = ["validate_debt_balance"]
