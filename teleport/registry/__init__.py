"""Registry — loads plugins and cross-links libraries, mappings, targets and generators."""
