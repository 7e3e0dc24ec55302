"""
Pure mapping functions from validated PokéAPI documents to the projected tool results.

Nothing in this module performs I/O; every function is deterministic in its input.
"""
from typing import Iterable, TypeVar

from pydantic import ValidationError

from pokeapi_mcp.models import (
    AbilityDocument,
    AbilityHolder,
    AbilityProjection,
    AbilitySlotProjection,
    ChainLink,
    DamageRelationsProjection,
    EvolutionChainDocument,
    EvolutionChainProjection,
    EvolutionDetail,
    EvolutionDetailProjection,
    EvolutionNode,
    GenerationDocument,
    GenerationProjection,
    ListedPokemon,
    ListingDocument,
    ListingProjection,
    LocalizedEntry,
    MoveDocument,
    MoveProjection,
    PokemonDocument,
    PokemonProjection,
    SpeciesDocument,
    SpeciesProjection,
    SpriteSet,
    StatProjection,
    TypeDocument,
    TypeProjection,
)

DEFAULT_LOCALE = "en"
ABILITY_HOLDER_LIMIT = 10
EFFECT_CHANCE_PLACEHOLDER = "$effect_chance%"
# Real chains are at most 3 stages deep
MAX_EVOLUTION_DEPTH = 32

Entry = TypeVar("Entry", bound=LocalizedEntry)
Document = TypeVar("Document")


class ProjectionError(ValueError):
    """The upstream document does not have the shape a projector relies on."""


def parse_document(model: type[Document], data: dict, path: str) -> Document:
    """Validates a raw upstream payload against its partial schema."""
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise ProjectionError(
            f"Unexpected PokéAPI response for {path}: {e.error_count()} invalid field(s)"
        ) from e


def select_by_locale(entries: Iterable[Entry], locale: str = DEFAULT_LOCALE) -> Entry | None:
    """Returns the first entry tagged with `locale`, or None when there is none."""
    return next((entry for entry in entries if entry.language.name == locale), None)


def _present(**fields):
    # Drop absent optional fields so they are omitted from the rendered JSON
    return {key: value for key, value in fields.items() if value is not None}


def project_pokemon(doc: PokemonDocument) -> PokemonProjection:
    return PokemonProjection(
        id=doc.id,
        name=doc.name,
        height=doc.height / 10,  # decimeters -> meters
        weight=doc.weight / 10,  # hectograms -> kilograms
        types=[slot.type.name for slot in doc.types],
        abilities=[
            AbilitySlotProjection(name=slot.ability.name, is_hidden=slot.is_hidden)
            for slot in doc.abilities
        ],
        stats=[StatProjection(name=slot.stat.name, base_stat=slot.base_stat) for slot in doc.stats],
        sprites=SpriteSet(
            front=doc.sprites.front_default,
            back=doc.sprites.back_default,
            shiny=doc.sprites.front_shiny,
        ),
    )


def project_species(doc: SpeciesDocument) -> SpeciesProjection:
    flavor = select_by_locale(doc.flavor_text_entries)
    flavor_text = flavor.flavor_text.replace("\f", " ") if flavor and flavor.flavor_text else None
    genus = select_by_locale(doc.genera)

    return SpeciesProjection(
        id=doc.id,
        name=doc.name,
        generation=doc.generation.name,
        # Only habitat gets a display default; other absent fields stay absent
        habitat=doc.habitat.name if doc.habitat else "unknown",
        is_legendary=doc.is_legendary,
        is_mythical=doc.is_mythical,
        is_baby=doc.is_baby,
        capture_rate=doc.capture_rate,
        base_happiness=doc.base_happiness,
        growth_rate=doc.growth_rate.name,
        evolution_chain_url=doc.evolution_chain.url,
        **_present(genus=genus.genus if genus else None, flavor_text=flavor_text),
    )


def project_type(doc: TypeDocument) -> TypeProjection:
    relations = doc.damage_relations
    return TypeProjection(
        id=doc.id,
        name=doc.name,
        damage_relations=DamageRelationsProjection(
            double_damage_to=[t.name for t in relations.double_damage_to],
            double_damage_from=[t.name for t in relations.double_damage_from],
            half_damage_to=[t.name for t in relations.half_damage_to],
            half_damage_from=[t.name for t in relations.half_damage_from],
            no_damage_to=[t.name for t in relations.no_damage_to],
            no_damage_from=[t.name for t in relations.no_damage_from],
        ),
        pokemon_count=len(doc.pokemon),
    )


def project_ability(doc: AbilityDocument) -> AbilityProjection:
    effect = select_by_locale(doc.effect_entries)
    return AbilityProjection(
        id=doc.id,
        name=doc.name,
        generation=doc.generation.name,
        pokemon_with_ability=[
            AbilityHolder(name=holder.pokemon.name, is_hidden=holder.is_hidden)
            for holder in doc.pokemon[:ABILITY_HOLDER_LIMIT]
        ],
        **_present(
            effect=effect.effect if effect else None,
            short_effect=effect.short_effect if effect else None,
        ),
    )


def project_move(doc: MoveDocument) -> MoveProjection:
    entry = select_by_locale(doc.effect_entries)
    effect = entry.short_effect if entry else None
    if effect and doc.effect_chance is not None:
        effect = effect.replace(EFFECT_CHANCE_PLACEHOLDER, f"{doc.effect_chance}%", 1)

    return MoveProjection(
        id=doc.id,
        name=doc.name,
        type=doc.type.name,
        damage_class=doc.damage_class.name,
        power=doc.power,
        accuracy=doc.accuracy,
        pp=doc.pp,
        priority=doc.priority,
        generation=doc.generation.name,
        target=doc.target.name,
        **_present(effect=effect),
    )


def project_listing(doc: ListingDocument, offset: int) -> ListingProjection:
    # The listing endpoint carries no ids, so they are derived from the page position
    return ListingProjection(
        count=doc.count,
        pokemon=[
            ListedPokemon(id=offset + index + 1, name=entry.name)
            for index, entry in enumerate(doc.results)
        ],
        has_more=doc.next is not None,
    )


def _project_evolution_detail(detail: EvolutionDetail) -> EvolutionDetailProjection:
    return EvolutionDetailProjection(
        trigger=detail.trigger.name,
        min_level=detail.min_level,
        min_happiness=detail.min_happiness,
        min_affection=detail.min_affection,
        **_present(
            item=detail.item.name if detail.item else None,
            held_item=detail.held_item.name if detail.held_item else None,
            time_of_day=detail.time_of_day or None,
        ),
    )


def build_evolution_tree(link: ChainLink, depth: int = 1) -> EvolutionNode:
    """
    Converts an upstream chain link into an EvolutionNode, depth-first.

    Sibling order follows the upstream document. `evolves_to` and
    `evolution_details` are left out entirely when they would be empty.
    """
    if depth > MAX_EVOLUTION_DEPTH:
        raise ProjectionError(f"Evolution chain exceeds {MAX_EVOLUTION_DEPTH} stages")

    children = [build_evolution_tree(child, depth + 1) for child in link.evolves_to]
    details = [_project_evolution_detail(detail) for detail in link.evolution_details]

    return EvolutionNode(
        species=link.species.name,
        **_present(evolves_to=children or None, evolution_details=details or None),
    )


def project_evolution_chain(doc: EvolutionChainDocument) -> EvolutionChainProjection:
    return EvolutionChainProjection(chain_id=doc.id, chain=build_evolution_tree(doc.chain))


def project_generation(doc: GenerationDocument) -> GenerationProjection:
    return GenerationProjection(
        id=doc.id,
        name=doc.name,
        region=doc.main_region.name,
        pokemon_count=len(doc.pokemon_species),
        pokemon=sorted(species.name for species in doc.pokemon_species),
        new_types=[t.name for t in doc.types],
        new_moves=len(doc.moves),
    )
