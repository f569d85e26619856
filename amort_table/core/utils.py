from amort_table.config import CURRENCY_SYMBOL


def currency(x):
    return f"{CURRENCY_SYMBOL}{x:,.2f}"


def percent(x):
    return f"{x:,.2f}"


def whole_years(x):
    return f"{x:,.0f}"
