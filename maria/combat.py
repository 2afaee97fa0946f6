"""Enemies that chase the player and a system to fight them."""

from __future__ import annotations

import math

ENEMY_HEALTH = 30.0


class ChasingEnemy:
    """An enemy that walks towards the player until it dies."""

    SPEED = 50.0

    def __init__(self, texture, position) -> None:
        self.texture = texture
        self.position = (float(position[0]), float(position[1]))
        self.health = ENEMY_HEALTH
        self.alive = True

    def update(self, dt: float, player_position) -> None:
        """Step towards the player unless already on top of them."""
        if not self.alive:
            return
        dx = player_position[0] - self.position[0]
        dy = player_position[1] - self.position[1]
        length = math.hypot(dx, dy)
        if length > 2.0:
            step = self.SPEED * dt / length
            self.position = (self.position[0] + dx * step, self.position[1] + dy * step)

    def take_damage(self, damage: float) -> None:
        """Lose health; die at zero or below."""
        self.health -= damage
        if self.health <= 0:
            self.alive = False

    def draw(self, surface) -> None:
        """Blit the enemy while it is alive."""
        if self.alive and self.texture is not None:
            surface.blit(self.texture, self.position)


class CombatSystem:
    """Keeps the enemies and resolves the player's attacks."""

    def __init__(self) -> None:
        self.enemies: list[ChasingEnemy] = []

    def add_enemy(self, enemy: ChasingEnemy) -> None:
        self.enemies.append(enemy)

    def update(self, dt: float, player_position) -> None:
        """Let every enemy chase the player."""
        for enemy in self.enemies:
            enemy.update(dt, player_position)

    def player_attack(self, attack_position, radius: float, damage: float) -> None:
        """Damage every living enemy closer than ``radius`` to the attack."""
        for enemy in self.enemies:
            if not enemy.alive:
                continue
            distance = math.hypot(
                enemy.position[0] - attack_position[0],
                enemy.position[1] - attack_position[1],
            )
            if distance < radius:
                enemy.take_damage(damage)

    def draw(self, surface) -> None:
        for enemy in self.enemies:
            enemy.draw(surface)