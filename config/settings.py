"""
Analysis Settings

Dataset schema, rating thresholds, chart styling, and model settings
for the red wine quality report.
"""

# ==============================================================================
# DATASET SCHEMA
# ==============================================================================

# Eleven physicochemical measurements, in source order
FEATURE_COLUMNS = [
    'fixed_acidity',
    'volatile_acidity',
    'citric_acid',
    'residual_sugar',
    'chlorides',
    'free_sulfur_dioxide',
    'total_sulfur_dioxide',
    'density',
    'pH',
    'sulphates',
    'alcohol',
]

TARGET_COLUMN = 'quality'  # Integer score 0-10 (3-8 observed)

REQUIRED_COLUMNS = FEATURE_COLUMNS + [TARGET_COLUMN]

# Unnamed row-number column written by R / pandas exports
INDEX_COLUMNS = ['X', 'Unnamed:_0', '']
INDEX_NAME = 'observation'

# Axis labels with units (from the UCI dataset description)
COLUMN_UNITS = {
    'fixed_acidity': 'Fixed acidity (tartaric acid, g/dm³)',
    'volatile_acidity': 'Volatile acidity (acetic acid, g/dm³)',
    'citric_acid': 'Citric acid (g/dm³)',
    'residual_sugar': 'Residual sugar (g/dm³)',
    'chlorides': 'Chlorides (sodium chloride, g/dm³)',
    'free_sulfur_dioxide': 'Free sulfur dioxide (mg/dm³)',
    'total_sulfur_dioxide': 'Total sulfur dioxide (mg/dm³)',
    'density': 'Density (g/cm³)',
    'pH': 'pH',
    'sulphates': 'Sulphates (potassium sulphate, g/dm³)',
    'alcohol': 'Alcohol (% by volume)',
    'quality': 'Quality (score 0-10)',
}

# Long-tailed measurements shown on a log10 axis
LOG_SCALE_COLUMNS = [
    'residual_sugar',
    'chlorides',
    'sulphates',
    'total_sulfur_dioxide',
]

# ==============================================================================
# RATING (derived from quality)
# ==============================================================================

RATING_COLUMN = 'rating'

# quality < 5 -> bad, 5-6 -> average, >= 7 -> good
RATING_BAD_BELOW = 5
RATING_GOOD_FROM = 7
RATING_LABELS = ['bad', 'average', 'good']

RATING_COLORS = {
    'bad': '#e74c3c',      # Red
    'average': '#f39c12',  # Orange
    'good': '#2ecc71',     # Green
}

# ==============================================================================
# PLOTTING
# ==============================================================================

FIGURE_DPI = 150
DEFAULT_FIGSIZE = (12, 6)
HISTOGRAM_BINS = 30
HEATMAP_CMAP = 'RdBu_r'
CORRELATION_METHODS = ['pearson', 'spearman']

# ==============================================================================
# MODELS
# ==============================================================================

RANDOM_STATE = 42

# Added to the OLS model one at a time, strongest quality correlates first
LINEAR_MODEL_PREDICTORS = [
    'alcohol',
    'volatile_acidity',
    'sulphates',
    'citric_acid',
    'total_sulfur_dioxide',
    'chlorides',
    'pH',
]

LOGISTIC_MODEL_PREDICTORS = LINEAR_MODEL_PREDICTORS
LOGISTIC_POSITIVE_LABEL = 'good'
LOGISTIC_TEST_SIZE = 0.3
