"""Reference contribution and tax rates.

Employee-side contributions are a fixed share of gross salary; income tax is a
single flat rate applied to post-contribution income above an allowance.
All rates are decimal fractions (0.1 means 10%).
"""

# === Employee contributions (share of gross) ===

PENSION_AND_DISABILITY_RATE = 0.188
HEALTH_INSURANCE_RATE = 0.075
ADDITIONAL_HEALTH_INSURANCE_RATE = 0.005
UNEMPLOYMENT_INSURANCE_RATE = 0.012

# === Income tax ===

# Flat rate applied to the taxable base
TAX_RATE = 0.1

# Post-contribution income exempt from tax
ALLOWANCE = 10932.0
