"""Framework integrations for searchkit-filtering."""
