"""Index configuration domain model."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ModelOption(str, Enum):
    """Modalities a video understanding model can process."""

    VISUAL = "visual"
    AUDIO = "audio"


class IndexModelSpec(BaseModel):
    """A model enabled on an index together with its modalities."""

    model_config = ConfigDict(frozen=True, protected_namespaces=())

    model_name: str = Field(description="Upstream model identifier")
    model_options: tuple[ModelOption, ...] = Field(
        default=(ModelOption.VISUAL, ModelOption.AUDIO),
        min_length=1,
        description="Modalities processed by the model",
    )

    def to_payload(self) -> dict[str, object]:
        """Render the model entry in the shape the index endpoint expects."""
        return {
            "model_name": self.model_name,
            "model_options": [option.value for option in self.model_options],
        }


# marengo handles search embeddings, pegasus handles generation
DEFAULT_INDEX_MODELS: tuple[IndexModelSpec, ...] = (
    IndexModelSpec(model_name="marengo2.7"),
    IndexModelSpec(model_name="pegasus1.2"),
)
