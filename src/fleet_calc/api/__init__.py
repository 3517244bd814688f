"""HTTP surface and input collection for the cost model."""
