from .config import SealedSecretsArgs, SealedSecretsImage
from .sealed_secrets import SealedSecrets
