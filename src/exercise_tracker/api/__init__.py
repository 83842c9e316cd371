"""HTTP API for the exercise tracker."""
