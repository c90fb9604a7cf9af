"""Application layer: services, UI and wiring."""
