from pydantic import BaseModel, ConfigDict

# Maior id aceito nas rotas (coluna INTEGER de 32 bits)
MAX_ID = 2**31 - 1

class BaseSchema(BaseModel):
    """Esquema base para todos os modelos Pydantic."""
    model_config = ConfigDict(from_attributes=True, str_strip_whitespace=True)
