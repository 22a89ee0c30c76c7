from dataclasses import dataclass

# Default number of derived keys retained by a deriver's cache.
MAX_CACHE_SIZE = 50

# The SigV4a external counter is a single byte and 0xFF is reserved.
MAX_SIGV4A_ATTEMPTS = 254


@dataclass(frozen=True)
class KeyDerivationConfig:
    """Tunables for a SigningKeyDeriver."""

    cache_size: int = MAX_CACHE_SIZE
    max_sigv4a_attempts: int = MAX_SIGV4A_ATTEMPTS

    def __post_init__(self) -> None:
        if self.cache_size < 1:
            raise ValueError(f"cache_size must be positive, got {self.cache_size}")
        if not 1 <= self.max_sigv4a_attempts <= MAX_SIGV4A_ATTEMPTS:
            raise ValueError(
                f"max_sigv4a_attempts must be between 1 and {MAX_SIGV4A_ATTEMPTS}, "
                f"got {self.max_sigv4a_attempts}"
            )
