"""Built-in class presets for common front-end frameworks.

These are classes the frameworks add or toggle from JavaScript, so they
rarely appear in a project's own stylesheets.
"""

from __future__ import annotations

PRESET_VERSION = "2014.1"

BOOTSTRAP_CLASSES: tuple[str, ...] = (
    "active", "affix", "affix-bottom", "affix-top", "arrow", "bottom", "btn",
    "carousel", "carousel-indicators", "collapse", "collapsed", "collapsing",
    "disabled", "divider", "dropdown", "dropdown-backdrop", "dropdown-menu",
    "fade", "height", "hidden", "in", "left", "modal", "modal-backdrop",
    "modal-content", "modal-dialog", "modal-open", "modal-scrollbar-measure",
    "navbar", "navbar-nav", "open", "out", "panel", "popover",
    "popover-content", "popover-title", "right", "slide", "tooltip",
    "tooltip-arrow", "tooltip-inner", "top", "width",
)

FOUNDATION_CLASSES: tuple[str, ...] = (
    "abide", "accordion", "accordion-navigation", "active", "alert",
    "alert-close", "back", "bottom", "carousel", "clearing",
    "clearing-assembled", "clearing-blackout", "clearing-caption",
    "clearing-close", "clearing-container", "clearing-main-next",
    "clearing-main-prev", "clearing-touch-label", "close-reveal-modal",
    "content", "disabled", "drop-bottom", "drop-left", "drop-right",
    "drop-top", "dropdown", "dropdown-content", "error", "exit-off-canvas",
    "expanded", "f-topbar-fixed", "fix-height", "fixed", "has-submenu",
    "interchange", "joyride", "joyride-close-tip", "joyride-content-wrapper",
    "joyride-expose-cover", "joyride-expose-wrapper", "joyride-modal-bg",
    "joyride-next-tip", "joyride-prev-tip", "joyride-timer-indicator",
    "joyride-timer-indicator-wrap", "joyride-tip-guide", "large", "left",
    "left-off-canvas-menu", "left-off-canvas-toggle", "left-submenu",
    "magellan", "medium", "mega", "move-left", "move-right", "moved", "next",
    "off-canvas-wrap", "offcanva-overlap-left", "offcanvas",
    "offcanvas-overlap", "offcanvas-overlap-right", "open", "orbit",
    "orbit-bullets", "orbit-caption", "orbit-next", "orbit-prev",
    "orbit-progress", "orbit-slide-number", "orbit-slides-container",
    "orbit-stack-on-small", "orbit-timer", "orbit-transitioning", "paused",
    "preloader", "range-slider-active-segment", "range-slider-handle",
    "reveal", "reveal-modal-bg", "right", "right-off-canvas-menu",
    "right-off-canvas-toggle", "right-submenu", "scroll-container", "slider",
    "small", "sticky", "tab", "tabs-content", "tap-to-close", "title",
    "toggle-topbar", "tooltip", "top", "top-bar-section", "topbar",
    "visible", "visible-img",
)

HTML5BP_CLASSES: tuple[str, ...] = (
    "browserupgrade", "clearfix", "focusable", "invisible", "no-js",
    "visuallyhidden",
)

PRESETS: dict[str, tuple[str, ...]] = {
    "bootstrap": BOOTSTRAP_CLASSES,
    "foundation": FOUNDATION_CLASSES,
    "html5bp": HTML5BP_CLASSES,
}
