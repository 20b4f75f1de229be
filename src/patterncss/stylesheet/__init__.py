from patterncss.stylesheet.builder import RuleBuilder
from patterncss.stylesheet.model import CSSRule, css_text, filter_properties, is_valid_css_value

__all__ = ["RuleBuilder", "CSSRule", "css_text", "filter_properties", "is_valid_css_value"]
