"""
Integration tests: full pipelines assembled from built-in stages.
"""
