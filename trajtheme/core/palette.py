"""Named design-system colors used to compose color schemes.

Shades follow the usual 50..900 scale; keys are ``<HUE>_<SHADE>`` (for
example ``INDIGO_600``) and values are lowercase ``#rrggbb`` strings.
"""

_SHADES = (50, 100, 200, 300, 400, 500, 600, 700, 800, 900)

_HUES = {
    'GRAY': (
        '#f9fafb', '#f3f4f6', '#e5e7eb', '#d1d5db', '#9ca3af',
        '#6b7280', '#4b5563', '#374151', '#1f2937', '#111827',
    ),
    'RED': (
        '#fef2f2', '#fee2e2', '#fecaca', '#fca5a5', '#f87171',
        '#ef4444', '#dc2626', '#b91c1c', '#991b1b', '#7f1d1d',
    ),
    'ORANGE': (
        '#fff7ed', '#ffedd5', '#fed7aa', '#fdba74', '#fb923c',
        '#f97316', '#ea580c', '#c2410c', '#9a3412', '#7c2d12',
    ),
    'YELLOW': (
        '#fefce8', '#fef9c3', '#fef08a', '#fde047', '#facc15',
        '#eab308', '#ca8a04', '#a16207', '#854d0e', '#713f12',
    ),
    'GREEN': (
        '#f0fdf4', '#dcfce7', '#bbf7d0', '#86efac', '#4ade80',
        '#22c55e', '#16a34a', '#15803d', '#166534', '#14532d',
    ),
    'BLUE': (
        '#eff6ff', '#dbeafe', '#bfdbfe', '#93c5fd', '#60a5fa',
        '#3b82f6', '#2563eb', '#1d4ed8', '#1e40af', '#1e3a8a',
    ),
    'INDIGO': (
        '#eef2ff', '#e0e7ff', '#c7d2fe', '#a5b4fc', '#818cf8',
        '#6366f1', '#4f46e5', '#4338ca', '#3730a3', '#312e81',
    ),
    'PURPLE': (
        '#faf5ff', '#f3e8ff', '#e9d5ff', '#d8b4fe', '#c084fc',
        '#a855f7', '#9333ea', '#7e22ce', '#6b21a8', '#581c87',
    ),
    'PINK': (
        '#fdf2f8', '#fce7f3', '#fbcfe8', '#f9a8d4', '#f472b6',
        '#ec4899', '#db2777', '#be185d', '#9d174d', '#831843',
    ),
}

PALETTE: dict[str, str] = {
    f'{hue}_{shade}': value
    for hue, values in _HUES.items()
    for shade, value in zip(_SHADES, values)
}


def palette_color(name: str) -> str:
    """Resolve a palette name such as ``'indigo_600'`` to its hex value."""
    try:
        return PALETTE[name.upper()]
    except KeyError:
        raise KeyError(f"Unknown palette color: {name}") from None
