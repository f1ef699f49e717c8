"""`python -m design_review` 진입점."""

from design_review.cli import run

run()
