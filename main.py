#!/usr/bin/env python3
"""
Main entry point for cloth simulation.

Usage:
    python main.py forward --save trajectory.npy --animate
    python main.py forward --aero --wind 0 0 5 --wind-speed 0.5 --pin top-edge
    python main.py replay --trajectory trajectory.npy --plot
"""

import argparse
import logging
import sys

from spring_cloth import (
    SimConfig,
    ClothSimulation,
    PIN_POLICIES,
    animate_cloth,
    plot_trajectories,
    save_trajectory,
    load_trajectory,
)
from spring_cloth.config import DEFAULT_GRAVITY
from spring_cloth.geometry import create
from spring_cloth.logging_config import setup_logging


def run_forward(args):
    """Run forward simulation."""
    print("=== Forward Simulation ===")

    # Create config
    config = SimConfig(
        cols=args.cols,
        rows=args.rows,
        spacing=args.spacing,
        stiffness=args.stiffness,
        mass=args.mass,
        damping=args.damping,
        dt=args.dt,
        steps=args.steps,
        gravity=tuple(args.gravity),
        wind=tuple(args.wind),
        wind_speed=args.wind_speed,
        aerodynamics=args.aero,
        pin=args.pin,
        use_shear=not args.no_shear,
        use_bend=not args.no_bend,
    )

    print(f"Config: {config.cols}x{config.rows} grid, stiffness={config.stiffness}, "
          f"damping={config.damping}, pin={config.pin}")
    print(f"Steps: {config.steps}, dt={config.dt:.6f}, aerodynamics={config.aerodynamics}")

    # Create simulator
    simulation = ClothSimulation.from_config(config)

    # Run simulation
    print("Running simulation...")
    trajectory = simulation.run(config, record=True)
    print(f"Trajectory shape: {trajectory.shape}")
    print(f"Final kinetic energy: {simulation.kinetic_energy(config.mass):.6f}")

    # Save if requested
    if args.save:
        save_trajectory(trajectory, args.save)

    # Animate if requested
    if args.animate:
        print("Creating animation...")
        animate_cloth(trajectory, simulation.structural_pairs, path=args.animation_path)
        print(f"Animation saved to {args.animation_path}")

    # Plot trajectories if requested
    if args.plot:
        import matplotlib.pyplot as plt

        plot_trajectories(trajectory)
        plt.savefig(args.plot_path)
        print(f"Trajectory plot saved to {args.plot_path}")

    print("Done!")
    return trajectory


def run_replay(args):
    """Plot or animate a previously saved trajectory."""
    print("=== Replay ===")

    trajectory = load_trajectory(args.trajectory)
    frames, particles = trajectory.shape[:2]
    if args.cols * args.rows != particles:
        print(f"Grid {args.cols}x{args.rows} does not match {particles} particles in trajectory")
        sys.exit(1)

    # Only the connectivity is needed to draw the cloth
    topology = create(args.cols, args.rows, 1.0, 0.0)
    pairs = [s.pair for s in topology.structural]
    print(f"Frames: {frames}, particles: {particles}")

    if args.animate:
        print("Creating animation...")
        animate_cloth(trajectory, pairs, path=args.animation_path)
        print(f"Animation saved to {args.animation_path}")

    if args.plot:
        import matplotlib.pyplot as plt

        plot_trajectories(trajectory)
        plt.savefig(args.plot_path)
        print(f"Trajectory plot saved to {args.plot_path}")

    print("Done!")
    return trajectory


def add_output_arguments(parser):
    parser.add_argument(
        "--animate", action="store_true", help="Create animation of the cloth"
    )
    parser.add_argument(
        "--animation-path", type=str, default="cloth_animation.gif",
        help="Animation output path (.gif or .mp4)",
    )
    parser.add_argument(
        "--plot", action="store_true", help="Plot particle trajectories"
    )
    parser.add_argument(
        "--plot-path", type=str, default="trajectories.png", help="Plot output path"
    )


def build_parser():
    parser = argparse.ArgumentParser(
        description="Mass-spring cloth simulation"
    )
    parser.add_argument(
        "--log-level", type=str, default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging level",
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # --- Forward simulation ---
    fwd_parser = subparsers.add_parser("forward", help="Run forward simulation")

    # Grid parameters
    fwd_parser.add_argument("--cols", type=int, default=10, help="Particles along x")
    fwd_parser.add_argument("--rows", type=int, default=10, help="Particles along z")
    fwd_parser.add_argument("--spacing", type=float, default=2.0, help="Particle spacing")
    fwd_parser.add_argument(
        "--pin", type=str, default="top-corners", choices=sorted(PIN_POLICIES),
        help="Which particles are pinned",
    )
    fwd_parser.add_argument("--no-shear", action="store_true", help="Skip diagonal springs")
    fwd_parser.add_argument("--no-bend", action="store_true", help="Skip bend springs")

    # Physics parameters
    fwd_parser.add_argument("--stiffness", type=float, default=300.0, help="Spring constant")
    fwd_parser.add_argument("--mass", type=float, default=1.0, help="Particle mass")
    fwd_parser.add_argument("--damping", type=float, default=0.3, help="Damping coefficient")
    fwd_parser.add_argument(
        "--gravity", type=float, nargs=3, default=list(DEFAULT_GRAVITY),
        metavar=("GX", "GY", "GZ"), help="Gravity force",
    )
    fwd_parser.add_argument("--aero", action="store_true", help="Apply wind drag")
    fwd_parser.add_argument(
        "--wind", type=float, nargs=3, default=[0.0, 0.0, 0.0],
        metavar=("WX", "WY", "WZ"), help="Wind velocity",
    )
    fwd_parser.add_argument("--wind-speed", type=float, default=0.0, help="Drag coefficient")

    # Simulation parameters
    fwd_parser.add_argument("--dt", type=float, default=0.03, help="Time step")
    fwd_parser.add_argument("--steps", type=int, default=300, help="Number of steps")

    # Output options
    fwd_parser.add_argument("--save", type=str, help="Save trajectory to file")
    add_output_arguments(fwd_parser)

    # --- Replay ---
    replay_parser = subparsers.add_parser("replay", help="Plot a saved trajectory")
    replay_parser.add_argument(
        "--trajectory", type=str, required=True, help="Trajectory file"
    )
    replay_parser.add_argument("--cols", type=int, default=10, help="Particles along x")
    replay_parser.add_argument("--rows", type=int, default=10, help="Particles along z")
    add_output_arguments(replay_parser)

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(getattr(logging, args.log_level))

    if args.command == "forward":
        run_forward(args)
    elif args.command == "replay":
        run_replay(args)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
