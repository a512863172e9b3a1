"""Minimal component-based 2D engine: objects, components, window, input and sound."""