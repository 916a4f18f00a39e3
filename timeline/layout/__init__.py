# timeline/layout/__init__.py
from .geometry import compute_layout, whole_days
