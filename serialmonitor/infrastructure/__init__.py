"""Infrastructure layer - adapters for the serial link and configuration."""
