"""Command-line interface for panel-grid."""
