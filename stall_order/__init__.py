"""Terminal ordering screen for a small food stall."""
