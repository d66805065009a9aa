# pokefight

The rules and state behind a side-view creature fighting game. Everything
here is plain Python: it keeps positions, velocities, timers, colours and
menu state, and leaves drawing, input and windows to whatever front end you
put on top.

## What is inside

- `pokefight.timing` – `Stopwatch`, a clock you advance yourself with
  `tick(seconds)` and reset with `restart()`; `elapsed` holds the seconds
  since the last restart. Negative times raise `ValueError`.
- `pokefight.pokedex` – the species table `POKEMONS` of `PokemonInfo`
  records, the numbered tables `AIR_POKEMONS`, `EARTH_POKEMONS`,
  `WATER_POKEMONS`, `FIRE_POKEMONS` and `GRASS_POKEMONS`, the `PokemonType`
  enum (earth 10, water 20, air 30, fire 40), `lookup(name)` and
  `species_of_type(ptype)`.
- `pokefight.tilemap` – `build_quads(tileset_width, tile_size, tiles, width,
  height)` turns a row-by-row grid of tile numbers into `Quad`s with screen
  positions and tileset coordinates; `Interior.load(...)` stores them and
  `Interior.vertex_count` counts four vertices per quad.
- `pokefight.health` – `Healthbar` (`set_health`, `decrease`, `update`,
  `fainted`) and `health_color(health)`, the green-to-yellow-to-red ramp.
  `update()` clamps health at zero and sets the bar length.
- `pokefight.pokeball` – `Pokeball` and its kinds `Normalball` (0.20),
  `Superball` (0.30) and `Masterball` (0.60): a thrown ball that bounces to
  rest, then `try_catch` rolls against `catch_threshold(proba,
  opponent_health)` after more than six seconds on the stopwatch, giving a
  `CatchResult` (`NOTHING`, `CAUGHT`, `ESCAPED`).
- `pokefight.attacks_bar` – `SpecialAttacksBar` and `BarPhase`: a special
  attack that is available, is used for `attack_time` seconds after
  `trigger`, then regenerates for `regeneration_time` seconds.
  `attack_images(ptype)` gives the image paths for each type.
- `pokefight.button` – `PokemonButton` (`set_health`, `level_up`, `update`,
  `update_mouse`) and `BackpackPokemon` for the fighter selection menu.
  `update_mouse(hovered, pressed)` returns the backpack index when a living
  pokemon is clicked.
- `pokefight.fighter` – `Fighter`, `PlayerFighter`, `OpponentFighter`,
  `Controls` and `jump_velocity(jump_height)`: movement, jumps, gravity,
  the shrinking `death_disappear`, the player's keeping inside the window
  and facing the enemy, and the opponent's random wandering, wall turns,
  random jumps and dodging of an `incoming_bullet`.
- `pokefight.states` – `Countdown` ("3, 2, 1, Go!"), whose `update` returns
  `CountdownStatus.RUNNING` until more than four seconds have passed and
  then `CountdownStatus.FIGHTING`, and `intro_message(game_mode)` for the
  modes `"w"` (wild pokemon) and `"t"` (trainer duel).
- `pokefight.results` – `fainted_message(name)`,
  `duel_result_message(won)`, `fall(fighter, ground_y, delta_time)` and
  `LeaveButton`, whose `update(hovered, pressed)` grows it under the mouse
  and returns `True` when it is clicked.

## Install

    pip install .

For the tests:

    pip install ".[test]"
    pytest

## A short example

    import random

    from pokefight.health import Healthbar, health_color
    from pokefight.timing import Stopwatch
    from pokefight.states import Countdown, CountdownStatus
    from pokefight.pokeball import Normalball

    bar = Healthbar()
    bar.set_health(40)
    bar.decrease(15)
    bar.update()
    print(bar.health, health_color(bar.health))

    clock = Stopwatch()
    countdown = Countdown()
    while countdown.update(1 / 60, clock.tick(1 / 60)) is CountdownStatus.RUNNING:
        pass

    ball = Normalball(velocity_x=600.0, velocity_y=-400.0, x=100.0, y=300.0)
    throw_clock = Stopwatch()
    rng = random.Random(1)
    result = ball.update(1 / 60, 1400, 700, throw_clock.tick(1 / 60) and throw_clock, bar.health, rng)

Time is always passed in explicitly, and randomness through an `rng`
argument (a `random.Random` works), so every step of a fight can be
replayed exactly.

## What it does not do

There is no window, rendering, sound or input handling, and no command to
run: image paths such as `PokemonButton.image` are only strings for a front
end to load. There is no game loop tying the pieces into a full fight, no
shooting or bullet handling (an opponent only reacts to the position it is
given as `incoming_bullet`), no collision test between sprites (the caller
decides when `PlayerFighter.bounce_off` applies), and no backpack storage
or saved games.