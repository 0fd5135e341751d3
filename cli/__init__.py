"""CLI 패키지(KR). Command line package (EN)."""
