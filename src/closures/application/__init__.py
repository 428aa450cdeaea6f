"""
Closure aggregation: normalization, ordering and analysis input mapping.
"""
from .normalizer import normalize, replace_newlines_with_periods, transform_location_string
from .sorter import sort_closures
from .transformer import to_analysis_input, to_analysis_inputs
from .pipeline import ClosureAggregationPipeline
