"""Pure tile domain: models, geometry, snapping, validation, solving."""
