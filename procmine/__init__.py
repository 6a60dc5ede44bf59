"""Process mining building blocks: activity projections, directly-follows graphs, Alpha+++ log repair and place candidates, and activity splits."""

__version__ = "0.1.0"