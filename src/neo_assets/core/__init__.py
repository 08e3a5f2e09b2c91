"""Core shared components for neo-assets."""
