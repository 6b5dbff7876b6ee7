"""
A resource with an embedded sub-record stored in the parent's table.
"""

from dataclasses import dataclass
from typing import Optional, Sequence

from pydantic import Field
from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import composite

from entitykit.domain import BaseDomainModel, BasePartialModel
from entitykit.dtos import BaseInputDTO, BaseOutputDTO, BasePartialInputDTO, BasePartialOutputDTO
from entitykit.entities import BaseEntity, BasePartialEntity
from entitykit.mappers import BaseMapper, BasePartialMapper


@dataclass
class EmbeddedChildEntity(BasePartialEntity):
    value: str


class EmbeddedTestEntity(BaseEntity):
    __tablename__ = "_embedded_test"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False)
    child_value = Column(String, nullable=False, default="")
    embedded_child = composite(EmbeddedChildEntity, child_value)


@dataclass(kw_only=True)
class EmbeddedChildModel(BasePartialModel):
    name: str = ""


@dataclass(kw_only=True)
class EmbeddedTestModel(BaseDomainModel[int]):
    name: str
    embedded_child: EmbeddedChildModel


class EmbeddedChildInput(BasePartialInputDTO):
    name: str = ""


class EmbeddedChildOutput(BasePartialOutputDTO):
    name: str = ""


class EmbeddedTestInput(BaseInputDTO[int]):
    name: str = ""
    embedded: EmbeddedChildInput = Field(default_factory=EmbeddedChildInput)


class EmbeddedTestOutput(BaseOutputDTO[int]):
    name: str
    embedded: EmbeddedChildOutput


class EmbeddedPartialTestMapper(
    BasePartialMapper[EmbeddedChildModel, EmbeddedChildEntity, EmbeddedChildInput, EmbeddedChildOutput]
):
    def to_model(self, dto: EmbeddedChildInput) -> EmbeddedChildModel:
        return EmbeddedChildModel(name=dto.name)

    def to_output_dto(self, model: EmbeddedChildModel) -> EmbeddedChildOutput:
        return EmbeddedChildOutput(name=model.name)

    def to_entity(self, model: EmbeddedChildModel) -> EmbeddedChildEntity:
        return EmbeddedChildEntity(value=model.name)

    def entity_to_model(self, entity: EmbeddedChildEntity) -> EmbeddedChildModel:
        return EmbeddedChildModel(name=entity.value)

    def apply_model_to(self, entity: EmbeddedChildEntity, model: EmbeddedChildModel) -> EmbeddedChildEntity:
        entity.value = model.name
        return entity


class EmbeddedTestMapper(BaseMapper[int, EmbeddedTestModel, EmbeddedTestEntity, EmbeddedTestInput, EmbeddedTestOutput]):
    entity_name = "EmbeddedTest"

    def __init__(self, child_mapper: Optional[EmbeddedPartialTestMapper] = None):
        self.child_mapper = child_mapper or EmbeddedPartialTestMapper()

    def partial_mappers(self) -> Sequence[BasePartialMapper]:
        return (self.child_mapper,)

    def to_model(self, dto: EmbeddedTestInput) -> EmbeddedTestModel:
        return EmbeddedTestModel(
            id=dto.id,
            name=dto.name,
            embedded_child=self.child_mapper.to_model(dto.embedded),
        )

    def to_output_dto(self, model: EmbeddedTestModel) -> EmbeddedTestOutput:
        return EmbeddedTestOutput(
            id=model.id,
            name=model.name,
            embedded=self.child_mapper.to_output_dto(model.embedded_child),
        )

    def to_entity(self, model: EmbeddedTestModel) -> EmbeddedTestEntity:
        return EmbeddedTestEntity(
            id=model.id,
            name=model.name,
            embedded_child=self.child_mapper.to_entity(model.embedded_child),
        )

    def entity_to_model(self, entity: EmbeddedTestEntity) -> EmbeddedTestModel:
        return EmbeddedTestModel(
            id=entity.id,
            name=entity.name,
            embedded_child=self.child_mapper.entity_to_model(entity.embedded_child),
        )

    def apply_model_to(self, entity: EmbeddedTestEntity, model: EmbeddedTestModel) -> EmbeddedTestEntity:
        entity.name = model.name
        # Reassign so the composite's columns pick up the change
        entity.embedded_child = self.child_mapper.apply_model_to(entity.embedded_child, model.embedded_child)
        return entity

    def extract_id(self, model: EmbeddedTestModel) -> Optional[int]:
        return model.id

    def entity_to_output_dto(self, entity: EmbeddedTestEntity) -> EmbeddedTestOutput:
        return EmbeddedTestOutput(
            id=entity.id,
            name=entity.name,
            embedded=self.child_mapper.entity_to_output_dto(entity.embedded_child),
        )
