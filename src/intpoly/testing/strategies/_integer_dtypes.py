import hypothesis.strategies
import torch

integer_dtypes = hypothesis.strategies.sampled_from(
    [
        torch.int8,
        torch.int16,
        torch.int32,
        torch.int64,
    ]
)
