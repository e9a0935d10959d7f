from .fill_policy import FillPolicy as FillPolicy
from .fill_with_real_policy import FillWithRealPolicy as FillWithRealPolicy
