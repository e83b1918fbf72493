"""Command-line interface and interactive file picker."""
