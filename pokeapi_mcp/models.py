from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

# --- Upstream partial schemas (Internal Contract) ---
# Each model declares only the fields a projector reads. Unknown keys are ignored;
# a missing required key fails validation instead of surfacing as None later on.

class NamedResource(BaseModel):
    name: str
    url: str | None = None

class APIResource(BaseModel):
    url: str

class LocalizedEntry(BaseModel):
    language: NamedResource

class FlavorTextEntry(LocalizedEntry):
    flavor_text: str | None = None

class Genus(LocalizedEntry):
    genus: str | None = None

class EffectEntry(LocalizedEntry):
    effect: str | None = None
    short_effect: str | None = None


class PokemonTypeSlot(BaseModel):
    type: NamedResource

class PokemonAbilitySlot(BaseModel):
    ability: NamedResource
    is_hidden: bool

class PokemonStatSlot(BaseModel):
    stat: NamedResource
    base_stat: int

class PokemonSprites(BaseModel):
    front_default: str | None = None
    back_default: str | None = None
    front_shiny: str | None = None

class PokemonDocument(BaseModel):
    id: int
    name: str
    height: int  # decimeters
    weight: int  # hectograms
    types: list[PokemonTypeSlot]
    abilities: list[PokemonAbilitySlot]
    stats: list[PokemonStatSlot]
    sprites: PokemonSprites


class SpeciesDocument(BaseModel):
    id: int
    name: str
    genera: list[Genus]
    generation: NamedResource
    habitat: NamedResource | None = None
    is_legendary: bool
    is_mythical: bool
    is_baby: bool
    capture_rate: int
    base_happiness: int | None
    growth_rate: NamedResource
    flavor_text_entries: list[FlavorTextEntry]
    evolution_chain: APIResource


class DamageRelations(BaseModel):
    double_damage_to: list[NamedResource]
    double_damage_from: list[NamedResource]
    half_damage_to: list[NamedResource]
    half_damage_from: list[NamedResource]
    no_damage_to: list[NamedResource]
    no_damage_from: list[NamedResource]

class TypeDocument(BaseModel):
    id: int
    name: str
    damage_relations: DamageRelations
    pokemon: list[Any]


class AbilityPokemon(BaseModel):
    is_hidden: bool
    pokemon: NamedResource

class AbilityDocument(BaseModel):
    id: int
    name: str
    effect_entries: list[EffectEntry]
    generation: NamedResource
    pokemon: list[AbilityPokemon]


class MoveDocument(BaseModel):
    id: int
    name: str
    type: NamedResource
    damage_class: NamedResource
    power: int | None
    accuracy: int | None
    pp: int | None
    priority: int
    effect_chance: int | None = None
    effect_entries: list[EffectEntry]
    generation: NamedResource
    target: NamedResource


class ListingDocument(BaseModel):
    count: int
    next: str | None = None
    results: list[NamedResource]


class EvolutionDetail(BaseModel):
    trigger: NamedResource
    min_level: int | None = None
    item: NamedResource | None = None
    held_item: NamedResource | None = None
    time_of_day: str | None = None
    min_happiness: int | None = None
    min_affection: int | None = None

class ChainLink(BaseModel):
    species: NamedResource
    evolution_details: list[EvolutionDetail]
    evolves_to: list["ChainLink"]

ChainLink.model_rebuild()

class EvolutionChainDocument(BaseModel):
    id: int
    chain: ChainLink


class GenerationDocument(BaseModel):
    id: int
    name: str
    main_region: NamedResource
    pokemon_species: list[NamedResource]
    types: list[NamedResource]
    moves: list[Any]


# --- Projected results (Public Tool Output) ---
# camelCase on the wire. Rendered with exclude_unset, so an optional field the
# projector never passed is omitted, while an explicit None is kept as null.

class Projection(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    def render(self) -> str:
        return self.model_dump_json(by_alias=True, exclude_unset=True, indent=2)


class AbilitySlotProjection(Projection):
    name: str
    is_hidden: bool

class StatProjection(Projection):
    name: str
    base_stat: int

class SpriteSet(Projection):
    front: str | None
    back: str | None
    shiny: str | None

class PokemonProjection(Projection):
    id: int
    name: str
    height: float  # meters
    weight: float  # kilograms
    types: list[str]
    abilities: list[AbilitySlotProjection]
    stats: list[StatProjection]
    sprites: SpriteSet


class SpeciesProjection(Projection):
    id: int
    name: str
    genus: str | None = None
    generation: str
    habitat: str
    is_legendary: bool
    is_mythical: bool
    is_baby: bool
    capture_rate: int
    base_happiness: int | None
    growth_rate: str
    flavor_text: str | None = None
    evolution_chain_url: str


class DamageRelationsProjection(Projection):
    double_damage_to: list[str]
    double_damage_from: list[str]
    half_damage_to: list[str]
    half_damage_from: list[str]
    no_damage_to: list[str]
    no_damage_from: list[str]

class TypeProjection(Projection):
    id: int
    name: str
    damage_relations: DamageRelationsProjection
    pokemon_count: int


class AbilityHolder(Projection):
    name: str
    is_hidden: bool

class AbilityProjection(Projection):
    id: int
    name: str
    effect: str | None = None
    short_effect: str | None = None
    generation: str
    pokemon_with_ability: list[AbilityHolder]


class MoveProjection(Projection):
    id: int
    name: str
    type: str
    damage_class: str
    power: int | None
    accuracy: int | None
    pp: int | None
    priority: int
    effect: str | None = None
    generation: str
    target: str


class ListedPokemon(Projection):
    id: int
    name: str

class ListingProjection(Projection):
    count: int
    pokemon: list[ListedPokemon]
    has_more: bool


class EvolutionDetailProjection(Projection):
    trigger: str
    min_level: int | None = None
    item: str | None = None
    held_item: str | None = None
    time_of_day: str | None = None
    min_happiness: int | None = None
    min_affection: int | None = None

class EvolutionNode(Projection):
    species: str
    evolves_to: list["EvolutionNode"] | None = None
    evolution_details: list[EvolutionDetailProjection] | None = None

EvolutionNode.model_rebuild()

class EvolutionChainProjection(Projection):
    chain_id: int
    chain: EvolutionNode


class GenerationProjection(Projection):
    id: int
    name: str
    region: str
    pokemon_count: int
    pokemon: list[str]
    new_types: list[str]
    new_moves: int
