"""design-review: PRD 기반 디자인 리뷰 워크플로우 도구."""

__version__ = "0.1.0"
