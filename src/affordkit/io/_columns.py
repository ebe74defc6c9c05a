"""Column name constants for DataFrame export."""

# Schedule columns
COL_PERIOD = "period"
COL_INTEREST = "interest"
COL_PRINCIPAL = "principal"
COL_REMAINING = "remaining_principal"

# Scenario columns
COL_TERM_MONTHS = "loan_term_months"
COL_ANNUAL_RATE = "annual_rate"
COL_PRICE = "purchase_price"
COL_FUNDS = "available_funds"
COL_TAXES = "annual_taxes"
COL_INSURANCE = "annual_insurance"
COL_CLOSING_COSTS = "closing_costs"
COL_RENOVATIONS = "renovation_costs"
COL_DOWNPAYMENT = "downpayment"
COL_BORROWED = "borrowed"

# Summary columns (scenario export adds these)
COL_MORTGAGE_PAYMENT = "mortgage_payment"
COL_TAX_PAYMENT = "tax_payment"
COL_INSURANCE_PAYMENT = "insurance_payment"
COL_TOTAL_PAYMENT = "total_payment"
