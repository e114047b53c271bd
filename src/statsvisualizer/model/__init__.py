from statsvisualizer.model.stats import Stats, DataPoint
from statsvisualizer.model.extractor import extract_stats
from statsvisualizer.model.sampler import parse_sample_size, sample_distribution

__all__ = ["Stats", "DataPoint", "extract_stats", "parse_sample_size", "sample_distribution"]
