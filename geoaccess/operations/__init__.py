"""Public operations: open, config options, geotransforms, DMS formatting."""
