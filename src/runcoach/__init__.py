"""Running coach dashboard core: athlete data models and workout classification."""
