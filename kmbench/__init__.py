"""Микро-бенчмарк реализаций k-means."""
