"""Build configuration registry with ordered repository resolution."""
