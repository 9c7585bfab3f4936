"""Demo script: fly a crewed rocket, release the cockpit, and track both bodies."""
from launch_sim.composites import find_template
from launch_sim.design import Design
from launch_sim.main import run_flight, summarize_flight
import numpy as np

design = Design(name='Demo Rocket')
design.add_parts(find_template('Basic Rocket').instantiate(0, 0).parts)
design.add_parts(find_template('Cockpit').instantiate(0, -95).parts)

body, log, reason = run_flight(design, angle=np.radians(-60), speed=25.0,
                               separate_at_frame=40, charge=100.0, perfect=True)
summary = summarize_flight(body, log, reason)

print("\n\n===== ROCKET TRACKING DETAILS =====")
if len(log) > 0:
    frames = np.array(log.frame)
    alts = np.array(log.altitude)
    speeds = np.array(log.speed)
    print(f"Log entries: {len(log)}")
    print(f"Frame range: {frames[0]} - {frames[-1]}")
    print(f"Peak altitude: {np.max(alts):.1f}")
    print(f"Final altitude: {alts[-1]:.1f}")
    print(f"Final speed: {speeds[-1]:.2f} ({speeds[-1] * 3.6:.1f} km/h)")
    print(f"Final mass: {log.mass[-1]:.1f}")

print()
print("===== COCKPIT TRACKING DETAILS =====")
if log.separation is not None:
    result = log.separation
    cockpit_y = np.array(log.cockpit_y[log.separation_frame:])
    launch_y = body.launch_position[1]
    print(f"Released at frame {log.separation_frame} "
          f"(charge {result.charge:.0f}, perfect={result.perfect})")
    print(f"Thrust multiplier: {result.thrust_multiplier:.2f}")
    print(f"Jettison speed: {result.jettison_speed:.2f}")
    print(f"Recoil on rocket: ({result.recoil[0]:.3f}, {result.recoil[1]:.3f})")
    print(f"Cockpit peak altitude: {launch_y - np.nanmin(cockpit_y):.1f}")
else:
    print("Cockpit was not released")

print()
print(f"Result: {summary['reason']} after {summary['frames']} frames")
