"""Infrastructure layer: settings and logging. The domain never imports it."""
