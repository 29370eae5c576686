# File containing shared parameters for case sampling and research statistics

# Assessment domains scored in the self-assessment questionnaire
default_domain_keys = (
    "governance",
    "employment",
    "social",
    "environmental",
    "economic",
    "stakeholder",
    "culture",
    "innovation",
)

# Domain count cited in the maximum variation methodology paragraph
methodology_domain_count = 8

# Maturity score range used by the questionnaire (not enforced when sampling)
score_min = 0.0
score_max = 5.0

# Decimal places used in justifications and exports
display_decimals = 2

# Default number of cases requested by the sampling assistant
default_sample_count = 5

# Upper bounds of the Landis & Koch kappa bands, lowest first
kappa_bands = (
    (0.0, "Poor"),
    (0.21, "Slight"),
    (0.41, "Fair"),
    (0.61, "Moderate"),
    (0.81, "Substantial"),
)
kappa_top_band = "Almost Perfect"

# Fields of the organisation side-table usable as purposive criteria
purposive_criteria_fields = ("country", "sector", "size")

# Column headers of the sampled cases CSV export
sampled_cases_csv_headers = ("Label", "Overall Score", "Context", "Justification")

# Column headers of the inter-rater reliability CSV export
irr_csv_headers = (
    "Tag",
    "Kappa",
    "Interpretation",
    "Observed Agreement",
    "Expected Agreement",
    "Rater 1 Count",
    "Rater 2 Count",
    "Both Count",
    "Total Responses",
)
