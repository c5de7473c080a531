"""Building blocks for operating MySQL InnoDB clusters: resource builders, metrics, signal handling and a MySQL Shell wrapper."""

__version__ = "0.1.0"