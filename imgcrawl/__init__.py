"""Same-origin image crawler that keeps the largest copy of each image."""
