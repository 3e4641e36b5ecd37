"""A bot that defends its base from monsters with three heroes and harasses the foe."""

from __future__ import annotations

import copy
import math
import sys
from dataclasses import dataclass, field
from typing import Optional

ETA_UNKNOWN = 2**31 - 1
_MAX_APPROACH_ROUNDS = 100_000


def _trunc(value: float) -> int:
    """Truncate towards zero; NaN becomes 0."""
    return 0 if math.isnan(value) else int(value)


@dataclass(frozen=True)
class Vec2:
    """A point or direction on the map."""

    x: float
    y: float

    def opposite_corner(self) -> "Vec2":
        """The other base corner of the map."""
        return MAP_CORNER if self == ORIGIN else ORIGIN

    def distance(self, other: "Vec2") -> float:
        return math.hypot(other.x - self.x, other.y - self.y)

    def magnitude(self) -> float:
        return self.distance(ORIGIN)

    def normalize(self) -> "Vec2":
        """Unit vector in the same direction; NaN components for the zero vector."""
        m = self.magnitude()
        if m == 0:
            return Vec2(math.nan, math.nan)
        return Vec2(self.x / m, self.y / m)

    def perp(self) -> "Vec2":
        return Vec2(-self.y, self.x)

    def in_bounds(self, bounds: "Vec2") -> bool:
        return 0.0 <= self.x <= bounds.x and 0.0 <= self.y <= bounds.y

    def __add__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> "Vec2":
        return Vec2(self.x * factor, self.y * factor)

    def __str__(self) -> str:
        return f"{_trunc(self.x)} {_trunc(self.y)}"


ORIGIN = Vec2(0.0, 0.0)
MAP_CORNER = Vec2(17630.0, 9000.0)


class Patrol:
    """Points on a quarter circle around a base, walked back and forth."""

    def __init__(self, center: Vec2, radius: float, segments: int) -> None:
        self.center = center
        self.radius = radius
        self.segments = segments
        if center == ORIGIN:
            self.start_angle, self.end_angle = math.radians(0.0), math.radians(90.0)
        else:
            self.start_angle, self.end_angle = math.radians(-180.0), math.radians(-90.0)
        self.step = (self.end_angle - self.start_angle) / segments
        self.points = [
            Vec2(
                center.x + radius * math.cos(self.start_angle + self.step * i),
                center.y + radius * math.sin(self.start_angle + self.step * i),
            )
            for i in range(int(segments) + 1)
        ]
        self.index = 0
        self.direction = 1

    def current(self) -> Vec2:
        return self.points[self.index]

    def advance(self) -> Vec2:
        """Return the current point and step to the next one, bouncing at the ends."""
        point = self.points[self.index]
        last = len(self.points) - 1
        if self.index == last:
            self.direction = -1
        elif self.index == 0:
            self.direction = 1
        self.index += self.direction
        return point

    def advance_offensively(self) -> Vec2:
        """Like advance, but wraps back to the start instead of reaching the last point."""
        last = len(self.points) - 1
        self.index %= last
        return self.advance()


@dataclass
class Monster:
    """A monster, with the turns it needs to reach its target base."""

    SPEED = 400.0
    AGGRO_RANGE = 5000.0

    id: int
    pos: Vec2
    shield: int
    charmed: bool
    hp: int
    velocity: Vec2
    target: Optional[Vec2] = None
    reaching: bool = False
    eta: int = field(init=False, default=ETA_UNKNOWN)

    def __post_init__(self) -> None:
        self.eta = self._estimate_eta()

    def _estimate_eta(self) -> int:
        if self.target is None:
            return ETA_UNKNOWN
        target = self.target
        step = self.velocity.normalize() * self.SPEED
        approach = 0
        while (self.pos + step * approach).distance(target) > self.AGGRO_RANGE:
            approach += 1
            if approach > _MAX_APPROACH_ROUNDS:
                return ETA_UNKNOWN
        reached = self.pos + step * approach
        excess = (target - reached).magnitude() - 300.0
        if not excess > 0.0:
            return 0
        return math.trunc(excess / self.SPEED + approach) + 1

    def simulate_move(self) -> None:
        """Advance one turn, turning towards the target once within aggro range."""
        if self.target is not None and self.pos.distance(self.target) <= self.AGGRO_RANGE:
            self.velocity = (self.target - self.pos).normalize() * self.SPEED
        self.pos = self.pos + self.velocity


def urgency(monster: Monster) -> tuple[int, int]:
    """Sort key: soonest arrival first, then the healthiest."""
    return monster.eta, -monster.hp


@dataclass
class Hero:
    """One of my heroes; every decision returns the command line to print."""

    VIEW_RANGE = 2200.0
    SPEED = 800.0
    DMG = 2
    ATTACK_RANGE = 800.0
    SHIELD_RANGE = 2200.0
    WIND_RANGE = 1280.0
    CONTROL_RANGE = 2200.0

    patrol: Patrol
    id: int = 0
    pos: Vec2 = ORIGIN
    shield: int = 0
    charmed: bool = False

    @classmethod
    def for_base(cls, base: Vec2, attack: bool) -> "Hero":
        """A defender patrolling near ``base`` or an attacker near the enemy base."""
        if attack:
            return cls(Patrol(base.opposite_corner(), 6000.0, 12))
        return cls(Patrol(base, 8200.0, 10))

    def update(self, hero_id: int, pos: Vec2, shield: int, charmed: bool) -> None:
        self.id = hero_id
        self.pos = pos
        self.shield = shield
        self.charmed = charmed

    def _move(self, pos: Vec2, yell: str) -> str:
        return f"MOVE {pos} {self.id}:{yell}"

    def _wind(self, target: Vec2, yell: str) -> str:
        return f"SPELL WIND {target} {self.id}:{yell}"

    def _shield(self, target_id: int, yell: str) -> str:
        return f"SPELL SHIELD {target_id} {self.id}:{yell}"

    def _control(self, target_id: int, target: Vec2, yell: str) -> str:
        return f"SPELL CONTROL {target_id} {target} {self.id}:{yell}"

    def find_intercept(self, monster: Monster) -> tuple[Vec2, int]:
        """Where to meet the monster, and after how many turns."""
        ghost = copy.copy(monster)
        rounds = 0
        while self.pos.distance(ghost.pos) > self.SPEED * rounds + self.ATTACK_RANGE:
            rounds += 1
            ghost.simulate_move()
        ghost.simulate_move()
        return ghost.pos, rounds

    def time_to_kill(self, monster: Monster) -> tuple[Vec2, int]:
        """Intercept point and the turns needed to reach and kill the monster."""
        target, rounds = self.find_intercept(monster)
        hits = monster.hp // self.DMG + (0 if monster.hp % self.DMG == 0 else 1)
        return target, rounds + hits

    def patrol_move(self, monsters_none: list[Monster]) -> str:
        """Chase the quickest reachable neutral monster near the patrol, else patrol."""
        if monsters_none:
            monsters_none.sort(key=lambda m: self.find_intercept(m)[1])
            for monster in monsters_none:
                if self.patrol.center.distance(monster.pos) < 9000.0:
                    target, _ = self.find_intercept(monster)
                    return self._move(target, f"N{monster.id}")
        return self._move(self.patrol.advance(), "PAT")

    def defend(
        self, monsters_me: list[Monster], monsters_none: list[Monster], mana: int
    ) -> str:
        """Handle the most urgent threat to my base; ``monsters_me`` is ordered by urgency."""
        if not monsters_me:
            return self.patrol_move(monsters_none)
        top = monsters_me[0]
        target, ttk = self.time_to_kill(top)
        away = self.patrol.center.opposite_corner()
        if ttk < top.eta:
            if ttk < top.eta - 2:
                for monster in monsters_me:
                    if (
                        mana > 10
                        and not monster.reaching
                        and monster.shield == 0
                        and self.pos.distance(monster.pos) < self.CONTROL_RANGE
                    ):
                        command = self._control(monster.id, away, "CM")
                        monsters_me.pop(0)
                        return command
            monsters_me.pop(0)
        elif mana > 10 and top.shield == 0 and self.pos.distance(top.pos) < self.WIND_RANGE:
            return self._wind(away, f"diff {top.eta - ttk}")
        return self._move(target, f"M{top.id}")

    def attack(
        self, monsters_enemy: list[Monster], monsters_none: list[Monster], mana: int
    ) -> str:
        """Push monsters into the enemy base when mana allows, else patrol."""
        if mana > 120:
            center = self.patrol.center
            for monster in monsters_enemy:
                if monster.shield == 0 and monster.pos.distance(self.pos) < self.WIND_RANGE:
                    return self._wind(center, "E")
            for monster in monsters_none:
                if (
                    monster.shield == 0
                    and monster.pos.distance(self.pos) < self.WIND_RANGE
                    and monster.pos.distance(center) < 7200.0
                ):
                    return self._wind(center, "N")
                if monster.shield == 0 and monster.pos.distance(self.pos) < self.CONTROL_RANGE:
                    return self._control(monster.id, center, "N")
            for monster in monsters_enemy:
                if (
                    monster.shield == 0
                    and monster.eta < 15
                    and monster.pos.distance(self.pos) < self.SHIELD_RANGE
                ):
                    return self._shield(monster.id, "E")
        return self.patrol_move(monsters_none)


@dataclass
class Game:
    """Both bases, my heroes and the monsters seen this turn."""

    base: Vec2
    hp: int = 3
    mana: int = 0
    enemy_hp: int = 3
    enemy_mana: int = 0
    heroes: list[Hero] = field(default_factory=list)
    monsters_me: list[Monster] = field(default_factory=list)
    monsters_enemy: list[Monster] = field(default_factory=list)
    monsters_none: list[Monster] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.enemy_base = self.base.opposite_corner()
        if not self.heroes:
            self.heroes = [
                Hero.for_base(self.base, False),
                Hero.for_base(self.base, False),
                Hero.for_base(self.base, True),
            ]

    def begin_turn(self, my_line: str, enemy_line: str) -> None:
        """Forget last turn's monsters and read both players' health and mana."""
        self.monsters_me.clear()
        self.monsters_enemy.clear()
        self.monsters_none.clear()
        self.hp, self.mana = (int(t) for t in my_line.split()[:2])
        self.enemy_hp, self.enemy_mana = (int(t) for t in enemy_line.split()[:2])

    def add_entity(self, line: str) -> None:
        """Record one entity: ``id type x y shield controlled health vx vy nearBase threatFor``."""
        tokens = line.split()
        if len(tokens) < 11:
            raise ValueError(f"malformed entity line: {line!r}")
        entity_id, kind = int(tokens[0]), int(tokens[1])
        pos = Vec2(float(tokens[2]), float(tokens[3]))
        shield, controlled, health = int(tokens[4]), int(tokens[5]) == 1, int(tokens[6])
        velocity = Vec2(float(tokens[7]), float(tokens[8]))
        near_base, threat_for = int(tokens[9]) == 1, int(tokens[10])
        if kind == 1:
            if not 0 <= entity_id <= 5:
                raise ValueError(f"hero id {entity_id}")
            self.heroes[entity_id % 3].update(entity_id, pos, shield, controlled)
        elif kind == 0:
            if threat_for == 1:
                monster = Monster(
                    entity_id, pos, shield, controlled, health, velocity, self.base, near_base
                )
                if monster.pos.distance(self.base) > 9000.0:
                    self.monsters_none.append(monster)
                else:
                    self.monsters_me.append(monster)
            elif threat_for == 2:
                self.monsters_enemy.append(
                    Monster(
                        entity_id, pos, shield, controlled, health, velocity,
                        self.enemy_base, near_base,
                    )
                )
            else:
                self.monsters_none.append(
                    Monster(entity_id, pos, shield, controlled, health, velocity)
                )

    def play_turn(self) -> list[str]:
        """Commands for the two defenders and the attacker, in hero order."""
        self.monsters_me.sort(key=urgency)
        return [
            self.heroes[0].defend(self.monsters_me, self.monsters_none, self.mana),
            self.heroes[1].defend(self.monsters_me, self.monsters_none, self.mana),
            self.heroes[2].attack(self.monsters_enemy, self.monsters_none, self.mana),
        ]


def main(argv=None) -> None:
    """Play the game over standard input and output."""
    readline = sys.stdin.readline
    base_x, base_y = (float(t) for t in readline().split()[:2])
    readline()  # heroes per player, always 3
    game = Game(Vec2(base_x, base_y))
    while True:
        my_line = readline()
        if not my_line.strip():
            break
        game.begin_turn(my_line, readline())
        for _ in range(int(readline())):
            game.add_entity(readline())
        for command in game.play_turn():
            print(command, flush=True)


if __name__ == "__main__":
    main()