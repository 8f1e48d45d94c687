"""Core types shared across the document store layers."""
