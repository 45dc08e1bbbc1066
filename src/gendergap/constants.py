"""
Column names, feature sets and defaults shared across the package.
"""

# Default input locations
INDICATORS_PATH = "data/gender.csv"
EDUCATION_PATH = "data/education_long_with_regions.csv"
OUTPUT_DIR = "charts"

# Indicator table (wide, one row per country-year)
COUNTRY_COL = "Country Name"
YEAR_COL = "Year"

FEMALE_SECONDARY_COL = "average_value_School enrollment, secondary, female (% gross)"
MALE_SECONDARY_COL = "average_value_School enrollment, secondary, male (% gross)"
FEMALE_LIFE_EXPECTANCY_COL = "average_value_Life expectancy at birth, female (years)"
MALE_LIFE_EXPECTANCY_COL = "average_value_Life expectancy at birth, male (years)"
FEMALE_LABOR_COL = (
    "average_value_Labor force participation rate, female "
    "(% of female population ages 15+) (modeled ILO estimate)"
)
MALE_LABOR_COL = (
    "average_value_Labor force participation rate, male "
    "(% of male population ages 15+) (modeled ILO estimate)"
)
FERTILITY_COL = "average_value_Fertility rate, total (births per woman)"

INDICATOR_REQUIRED_COLUMNS = [COUNTRY_COL, YEAR_COL]

# Features used by the correlation heatmap and missing-value profile
CORRELATION_FEATURES = [
    FEMALE_SECONDARY_COL,
    MALE_SECONDARY_COL,
    FEMALE_LIFE_EXPECTANCY_COL,
    MALE_LIFE_EXPECTANCY_COL,
    FEMALE_LABOR_COL,
    MALE_LABOR_COL,
    FERTILITY_COL,
]

# Short labels for chart axes
FEATURE_LABELS = {
    FEMALE_SECONDARY_COL: "Secondary enrollment (F)",
    MALE_SECONDARY_COL: "Secondary enrollment (M)",
    FEMALE_LIFE_EXPECTANCY_COL: "Life expectancy (F)",
    MALE_LIFE_EXPECTANCY_COL: "Life expectancy (M)",
    FEMALE_LABOR_COL: "Labor participation (F)",
    MALE_LABOR_COL: "Labor participation (M)",
    FERTILITY_COL: "Fertility rate",
}

# Education table (long, one row per country/region/level/gender)
REGION_COL = "Region"
INCOME_GROUP_COL = "IncomeGroup"
EDUCATION_LEVEL_COL = "EducationLevel"
GENDER_COL = "Gender"
ENROLLMENT_COL = "EnrollmentRate"

EDUCATION_REQUIRED_COLUMNS = [
    REGION_COL,
    INCOME_GROUP_COL,
    EDUCATION_LEVEL_COL,
    GENDER_COL,
    ENROLLMENT_COL,
]

GENDERS = ["Female", "Male"]
INCOME_ORDER = [
    "Low income",
    "Lower middle income",
    "Upper middle income",
    "High income",
]
EDUCATION_LEVELS = ["Primary", "Secondary", "Tertiary"]

# Aggregation policy for groups without any valid observation
EMPTY_GROUP_POLICIES = ("missing", "zero")
DEFAULT_EMPTY_GROUP_POLICY = "missing"

DEFAULT_TOP_N = 15
