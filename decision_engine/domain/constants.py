"""Business bounds for loan decisions, fixed at deployment"""

# Loan amount in euros
MIN_LOAN_AMOUNT = 2000
MAX_LOAN_AMOUNT = 10000

# Loan period in months
MIN_LOAN_PERIOD = 12
MAX_LOAN_PERIOD = 60

# Credit capacity weights per segment (debt segment is always 0)
SEGMENT_1_CREDIT_MODIFIER = 100
SEGMENT_2_CREDIT_MODIFIER = 300
SEGMENT_3_CREDIT_MODIFIER = 1000

# Applicant age in years. The loan must be repaid before the assumed
# life expectancy, so the longest term is subtracted from it.
MIN_AGE = 18
LIFE_EXPECTANCY = 80
MAX_AGE = LIFE_EXPECTANCY - MAX_LOAN_PERIOD // 12

# Minimum credit score for approval
APPROVAL_THRESHOLD = 1.0
