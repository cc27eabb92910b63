from .classes import fluid_name, region_name, class_dic, DomainError, UnimplementedRegionError, IncompatiblePhaseError, ContractViolation
