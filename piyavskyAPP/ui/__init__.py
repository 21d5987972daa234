"""Відображення результатів: текстовий графік та matplotlib-графіки."""
