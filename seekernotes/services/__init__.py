from .snt_markup import SntRenderer, detect_font_style, html_to_snt, snt_to_html

__all__ = ["SntRenderer", "detect_font_style", "html_to_snt", "snt_to_html"]
