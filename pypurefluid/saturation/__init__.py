from .saturation import saturation_pressure, liquid_density_boundary, saturation_temperature, saturation_table
