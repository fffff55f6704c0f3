"""
Pydantic models for the Correios CEP lookup response
"""

from typing import Dict, List

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class CEP(BaseModel):
    """
    Address record returned by Correios for a CEP.

    Values are kept exactly as the server sends them.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    state: str = Field(..., validation_alias="uf")
    city: str = Field(..., validation_alias="localidade")
    street: str = Field(..., validation_alias=AliasChoices("logradouroDNEC", "logradouro"))
    neighborhood: str = Field(..., validation_alias="bairro")
    postal_code: str = Field(..., validation_alias="cep")

    def to_dict(self) -> Dict[str, str]:
        """
        Convert the record back to the Correios key names.

        Returns:
            Dictionary with uf, localidade, logradouro, bairro and cep
        """
        return {
            'uf': self.state,
            'localidade': self.city,
            'logradouro': self.street,
            'bairro': self.neighborhood,
            'cep': self.postal_code,
        }


class RespostaAPI(BaseModel):
    """Envelope wrapping the address list in a Correios response."""

    erro: bool
    mensagem: str
    total: int
    dados: List[CEP]
