from setuptools import setup, find_packages

setup(
    name="quickmol2",
    version="0.1.0",
    description="A lightweight interactive perspective viewer for MOL2 molecules",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=[
        "quickMOL2", "camera", "config", "element_colors", "event_handler",
        "export", "geometry_utils", "hud", "interaction", "message_panel",
        "message_service", "mol2_molecule", "mol2_source", "mol2_viewer",
        "normalizer", "scene", "scene_renderer", "zobjects"
    ],
    install_requires=[
        "numpy>=1.19.0",
        "python-xlib>=0.31",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "quickmol2=quickMOL2:main",
        ],
    },
)
