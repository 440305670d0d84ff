import numpy as np
import pytest

import main


def test_forward_saves_trajectory(tmp_path, capsys):
    path = tmp_path / "run.npy"
    main.main(["forward", "--cols", "3", "--rows", "3", "--steps", "4", "--save", str(path)])
    assert "Done!" in capsys.readouterr().out
    assert np.load(path).shape == (4, 9, 3)


def test_forward_with_wind_and_plot(tmp_path):
    plot_path = tmp_path / "paths.png"
    main.main([
        "forward", "--cols", "4", "--rows", "2", "--steps", "3", "--aero",
        "--wind", "0", "1", "0", "--wind-speed", "0.5", "--pin", "top-edge",
        "--no-bend", "--plot", "--plot-path", str(plot_path),
    ])
    assert plot_path.exists()


def test_replay_checks_grid(tmp_path):
    path = tmp_path / "run.npy"
    np.save(path, np.zeros((2, 9, 3)))
    with pytest.raises(SystemExit):
        main.main(["replay", "--trajectory", str(path), "--cols", "4", "--rows", "4"])


def test_no_command_prints_help():
    with pytest.raises(SystemExit):
        main.main([])
