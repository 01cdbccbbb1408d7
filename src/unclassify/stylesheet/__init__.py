from unclassify.stylesheet.harvest import classes_in_selector, harvest_classes
from unclassify.stylesheet.model import AtStatement, GroupRule, StyleRule, Stylesheet
from unclassify.stylesheet.parser import aggregate_stylesheets, parse_stylesheet

__all__ = [
    "aggregate_stylesheets",
    "parse_stylesheet",
    "classes_in_selector",
    "harvest_classes",
    "Stylesheet",
    "StyleRule",
    "GroupRule",
    "AtStatement",
]
