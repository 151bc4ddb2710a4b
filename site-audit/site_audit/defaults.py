"""
Design-system tables checked by the accessibility tools.

Both tables are hard-coded from the site's Tailwind palette and component
sizes. They are tuples of frozen models so nothing can change them at runtime.
"""

from .models import ColorPair, TouchTarget


COLOR_PAIRS: tuple[ColorPair, ...] = (
    # Primary text on white background
    ColorPair(label="Body text (gray-900 on white)", fg="#111827", bg="#ffffff", usage="normal"),
    ColorPair(label="Secondary text (gray-700 on white)", fg="#374151", bg="#ffffff", usage="normal"),
    ColorPair(label="Tertiary text (gray-600 on white)", fg="#4b5563", bg="#ffffff", usage="normal"),
    ColorPair(label="Muted text (gray-500 on white)", fg="#6b7280", bg="#ffffff", usage="normal"),

    # Primary colors
    ColorPair(label="Primary button text (white on primary-500) - Large/Bold", fg="#ffffff", bg="#3b82f6", usage="large"),
    ColorPair(label="Primary button hover (white on primary-600)", fg="#ffffff", bg="#2563eb", usage="normal"),
    ColorPair(label="Primary link (primary-600 on white)", fg="#2563eb", bg="#ffffff", usage="normal"),
    ColorPair(label="Primary link hover (primary-700 on white)", fg="#1d4ed8", bg="#ffffff", usage="normal"),

    # Secondary colors
    ColorPair(label="Strategic badge (secondary-700 on secondary-100)", fg="#6d28d9", bg="#ede9fe", usage="normal"),

    # Status colors
    ColorPair(label="Success indicator", fg="#10b981", bg="#f0fdf4", usage="decorative"),
    ColorPair(label="Success text (green-700 on green-50)", fg="#15803d", bg="#f0fdf4", usage="normal"),
    ColorPair(label="Error text (red-700 on red-50)", fg="#b91c1c", bg="#fef2f2", usage="normal"),

    # Large text (headings)
    ColorPair(label="Heading (gray-900 on white)", fg="#111827", bg="#ffffff", usage="large"),
    ColorPair(label="Heading (gray-900 on gray-50)", fg="#111827", bg="#f9fafb", usage="large"),
)


# Mobile sizes; CSS enforces a 44px minimum via media query
TOUCH_TARGETS: tuple[TouchTarget, ...] = (
    TouchTarget(name="Button (sm)", size="36px (h-9)", passes=False),
    TouchTarget(name="Button (md)", size="40px (h-10)", passes=False),
    TouchTarget(name="Button (lg)", size="48px (h-12)", passes=True),
    TouchTarget(name="Mobile nav button", size="44px (p-2 + icon)", passes=True),
    TouchTarget(name="Social media icons", size="48px (w-12 h-12)", passes=True),
    TouchTarget(name="Form inputs", size="40px+ (py-2)", passes=False),
)
