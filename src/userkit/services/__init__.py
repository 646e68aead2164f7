"""Service layer: non-raising adapters over the user factory."""
