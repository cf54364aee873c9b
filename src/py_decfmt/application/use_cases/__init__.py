from .format_amount import FormatAmount, FormatAmounts

__all__ = ["FormatAmount", "FormatAmounts"]
