from .models import FormattedAmountDTO

__all__ = ["FormattedAmountDTO"]
