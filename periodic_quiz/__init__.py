"""Interactive periodic table with an element quiz engine."""
