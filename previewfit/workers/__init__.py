"""Background workers for PreviewFit."""
