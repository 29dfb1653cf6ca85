"""Built-in en-US messages, keyed by stable ids.

Units are joined with a no-break space so values never wrap apart from them.
"""

EN_US = {
    "common.seconds": "{timeInMs:seconds}\u00a0s",
    "common.milliseconds": "{timeInMs:milliseconds}\u00a0ms",
    "metrics.first_meaningful_paint.title": "First Meaningful Paint",
    "metrics.first_meaningful_paint.description": (
        "First Meaningful Paint measures when the primary content of a page is "
        "visible. [Learn more](https://web.dev/first-meaningful-paint)."
    ),
}
