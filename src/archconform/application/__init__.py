"""archconform application layer: graph building, detection, filtering, metrics."""
