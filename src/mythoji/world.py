from esper import World

from mythoji.categories import Family
from mythoji.gallery.components import GalleryState
from mythoji.gallery.factory import spawn_gallery_page


def create_world(family: Family = Family.PERSON) -> World:
    world = World()

    # Single gallery state resource, followed by the first page of cells.
    state = GalleryState(family=family)
    state_entity = world.create_entity()
    world.add_component(state_entity, state)
    spawn_gallery_page(world, state)
    return world
