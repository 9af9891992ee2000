# config.py
# Select active theme here (change this to switch themes)

# ================================
# Theme Definitions
# ================================

# Light theme (default, white background)
LIGHT_THEME = {
    "background_color": (255, 255, 255),    # White background
    "default_text_color": (0, 0, 0),        # Black text

    # Sphere outline (None = no outline)
    "atom_border_color": None,

    # UI elements
    "hud_text_color": (0, 0, 0),            # Black
    "message_panel_bg": (240, 240, 240),    # Light gray
    "message_info_color": (0, 0, 0),        # Black
    "message_warning_color": (200, 150, 0), # Amber
    "message_error_color": (200, 0, 0),     # Red
}

# Dark theme (black background)
DARK_THEME = {
    "background_color": (0, 0, 0),          # Black background
    "default_text_color": (220, 220, 220),  # Light gray text

    "atom_border_color": (40, 40, 40),      # Dark outline

    # UI elements
    "hud_text_color": (220, 220, 220),      # Light gray
    "message_panel_bg": (40, 40, 40),       # Dark gray
    "message_info_color": (220, 220, 220),  # Light gray
    "message_warning_color": (255, 200, 0), # Bright amber
    "message_error_color": (255, 80, 80),   # Bright red
}

# Print-optimized theme (for SVG export)
PRINT_THEME = {
    "background_color": (255, 255, 255),
    "default_text_color": (0, 0, 0),
    "atom_border_color": (0, 0, 0),
}

# Options: LIGHT_THEME, DARK_THEME
CURRENT_THEME = LIGHT_THEME

# ================================
# Canvas Settings
# ================================
CANVAS_SETTINGS = {
    "background_color": CURRENT_THEME["background_color"],
    "width": 800,
    "height": 600,
    "title": "quickMOL2",
}

# ================================
# Atom / Sphere Visualization Settings
# ================================
ATOM_STYLE = {
    # Color for elements missing from the color table.
    "fallback_color": "#dddddd",

    # Outline drawn around spheres (None disables it).
    "border_color": CURRENT_THEME["atom_border_color"],
    "border_thickness": 1,

    # Minimum radius in pixels to display a sphere.
    "min_radius": 1,

    # Fake specular spot on spheres
    "highlight": {
        "enabled": True,
        "size_ratio": 0.3,         # Size relative to sphere radius
        "offset_ratio": 0.35,      # Offset from center (towards upper-left)
        "brightness_factor": 1.4,
    },

    # Darken primitives further away from the camera
    "depth_shading": {
        "enabled": True,
        "min_factor": 0.55,        # Brightness of the farthest primitive
    },
}

# ================================
# Bond Visualization Settings
# ================================
BOND_STYLE = {
    # Minimum thickness in pixels
    "min_thickness_px": 1,
}

# ================================
# Highlighting Settings
# ================================
HIGHLIGHT = {
    # Color for highlighted atoms and bonds (MOL2 highlight column).
    "color": "#00ff00",
}

# ================================
# Normalization Settings
# ================================
NORMALIZATION = {
    # "none" (center only), "radius" or "extent"
    "mode": "extent",

    # Edge length of the display volume the molecule is scaled into.
    "box_size": 50.0,

    # Bond cylinder radius per unit of scale.
    "bond_radius": 0.16,

    # Sphere radius relative to the bond radius.
    "atom_radius_factor": 3.0,
}

# ================================
# Camera Settings
# ================================
CAMERA = {
    "fov_deg": 75.0,
    "near": 0.1,
    "far": 1000.0,

    # Camera sits on +z at distance_factor * display extent.
    "distance_factor": 1.25,

    # Depth of the plane used to turn drag coordinates into directions,
    # as a fraction of the display extent.
    "drag_depth_factor": 0.25,
}

# ================================
# Viewer Interaction Settings
# ================================
VIEWER_INTERACTION = {
    # Zoom change per wheel delta unit.
    "zoom_step": 0.01,

    # Zoom clamp range.
    "min_zoom": 0.1,
    "max_zoom": 10.0,

    # Wheel delta reported for one notch of an X11 scroll button.
    "wheel_notch_delta": 10.0,

    # Idle rotation about the world Y axis (radians per frame).
    "auto_rotate": True,
    "auto_rotate_step": 0.01,
    "auto_rotate_axis": (0.0, 1.0, 0.0),

    # Seconds between redraws.
    "frame_interval": 1.0 / 60.0,
}

# ================================
# MOL2 Retrieval Settings
# ================================
MOL2_SOURCE = {
    # Directory or http(s) URL that templated names are resolved against.
    "base": ".",

    # Location of a named molecule, relative to base.
    "template": "mol2/{name}.mol2",

    # Used when no name is given.
    "default": "sample.mol2",

    # Network timeout in seconds.
    "timeout": 10.0,
}

# ================================
# HUD Panel Settings
# ================================
HUD_STYLE = {
    "x": 10,                              # X-coordinate for HUD text
    "y_offset": 75,                       # Vertical offset from bottom
    "line_spacing": 16,                   # Spacing between HUD lines
    "font_size": 14,                      # Font size for HUD text
    "color": CURRENT_THEME["hud_text_color"],  # Color of HUD text
}

# ================================
# Message Panel Settings
# ================================
MESSAGE_PANEL_STYLE = {
    "x": 10,                              # X-coordinate for messages
    "y_offset": 10,                       # Vertical offset from bottom
    "line_spacing": 16,                   # Spacing between messages
    "font_size": 12,                      # Font size for messages
    "bg_color": CURRENT_THEME["message_panel_bg"],  # Background color
    "padding": 5,                         # Padding around text
    "max_messages": 3,                    # Maximum number of messages to show
}

# ================================
# Message Types Settings
# ================================
MESSAGE_TYPES = {
    "info": {
        "prefix": "",
        "color": CURRENT_THEME["message_info_color"],
    },
    "warning": {
        "prefix": "WARNING",
        "color": CURRENT_THEME["message_warning_color"],
    },
    "error": {
        "prefix": "ERROR",
        "color": CURRENT_THEME["message_error_color"],
    }
}
