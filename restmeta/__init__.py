"""restmeta - metadata rendering configuration for REST resources.

Provides the MetadataConfiguration container (description-key policy, ALPS
exposure, per-type JSON schema formats and formatting patterns) together with
a small FastAPI application layer that serves resource profile metadata.
"""

__version__ = "0.1.0"
